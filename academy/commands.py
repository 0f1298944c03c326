import os
import sys

import click

from academy import app
from academy.helpers.errors import AcademyError
from config import ACADEMY_ENV


@app.cli.command(with_appcontext=False)
@click.argument("test_names", nargs=-1)
def test(test_names):
    # the database engine is bound when the app is created
    if ACADEMY_ENV != "test":
        click.echo("Run the tests with ACADEMY_ENV=test", err=True)
        sys.exit(1)

    import unittest

    if test_names:
        """Run specific unit tests.

        Example:
        $ flask test academy.tests.test_anonymization ...
        """
        test_suite = unittest.TestLoader().loadTestsFromNames(test_names)
    else:
        """Run unit tests"""
        root_project_path = os.path.dirname(app.root_path)
        test_suite = unittest.TestLoader().discover(
            os.path.join(app.root_path, "tests"),
            pattern="test_*.py",
            top_level_dir=root_project_path,
        )
    result = unittest.TextTestRunner(verbosity=3).run(test_suite)
    if result.wasSuccessful():
        sys.exit(0)
    sys.exit(1)


@app.cli.command("withdraw_user", with_appcontext=True)
@click.argument("role")
@click.argument("user_id", type=int)
@click.option("--reason", default=None, help="Reason given by the user")
def withdraw_user(role, user_id, reason):
    """Withdraw a user account and anonymize its history.

    Example:
    $ flask withdraw_user STUDENT 42 --reason "moving abroad"
    """
    from academy.services.withdrawal import withdraw

    try:
        result = withdraw(role, user_id, reason)
    except AcademyError as e:
        error = e.to_dict()
        click.echo(f"{e.code}: {error['message']}", err=True)
        for key, value in error["extensions"].items():
            if key != "code":
                click.echo(f"  {key}: {value}", err=True)
        sys.exit(1)

    click.echo(f"User {user_id} withdrawn as {result.anonymous_id}")
    for entity_type, count in result.migrated_counts.items():
        click.echo(f"  {entity_type}: {count}")
