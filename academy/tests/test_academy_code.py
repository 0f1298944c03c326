from unittest.mock import patch

from academy import app, db
from academy.domain.academy import (
    create_academy,
    generate_unique_academy_code,
)
from academy.helpers.errors import AcademyCodeGenerationError
from academy.seed.factories import AcademyFactory, PrincipalFactory
from academy.tests import BaseTest


class TestAcademyCode(BaseTest):
    def test_code_format(self):
        code = generate_unique_academy_code()
        self.assertRegex(code, r"^ACAD-[0-9A-Z]{8}$")

    def test_collision_is_retried(self):
        AcademyFactory.create(code="ACAD-TAKEN000")

        with patch(
            "academy.domain.academy.random_base36",
            side_effect=["TAKEN000", "FREE0000"],
        ):
            code = generate_unique_academy_code()

        self.assertEqual(code, "ACAD-FREE0000")

    def test_gives_up_after_bounded_attempts(self):
        AcademyFactory.create(code="ACAD-TAKEN000")

        with patch(
            "academy.domain.academy.random_base36", return_value="TAKEN000"
        ) as random_base36:
            with self.assertRaises(AcademyCodeGenerationError):
                generate_unique_academy_code()

        self.assertEqual(
            random_base36.call_count, app.config["ACADEMY_CODE_MAX_ATTEMPTS"]
        )

    def test_create_academy_links_principal(self):
        principal = PrincipalFactory.create(academy=None)

        academy = create_academy(
            principal, "새 발레 학원", phone_number="02-555-0000"
        )
        db.session.commit()

        self.assertIsNotNone(academy.id)
        self.assertEqual(principal.academy_id, academy.id)
        self.assertTrue(academy.code.startswith("ACAD-"))
