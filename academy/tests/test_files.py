import os
import tempfile
from unittest import TestCase
from unittest.mock import patch

from academy import app
from academy.helpers.files import delete_profile_photo, extract_upload_path


class TestDeleteProfilePhoto(TestCase):
    def setUp(self):
        self.tmp_dir = tempfile.TemporaryDirectory()
        self.previous_config = {
            key: app.config[key]
            for key in ("UPLOAD_ROOT", "PROFILE_PHOTO_STORAGE")
        }
        app.config["UPLOAD_ROOT"] = self.tmp_dir.name
        app.config["PROFILE_PHOTO_STORAGE"] = "local"

        photo_dir = os.path.join(self.tmp_dir.name, "uploads", "photos")
        os.makedirs(photo_dir)
        self.photo_path = os.path.join(photo_dir, "me.jpg")
        with open(self.photo_path, "wb") as f:
            f.write(b"jpeg")

    def tearDown(self):
        app.config.update(self.previous_config)
        self.tmp_dir.cleanup()

    def test_upload_path_prefixes(self):
        for url in (
            "/uploads/photos/me.jpg",
            "./uploads/photos/me.jpg",
            "uploads/photos/me.jpg",
        ):
            self.assertEqual(extract_upload_path(url), "uploads/photos/me.jpg")
        self.assertIsNone(extract_upload_path("https://cdn.test/me.jpg"))

    def test_deletes_local_file(self):
        self.assertTrue(delete_profile_photo("/uploads/photos/me.jpg"))
        self.assertFalse(os.path.exists(self.photo_path))

    def test_missing_file(self):
        self.assertFalse(delete_profile_photo("/uploads/photos/other.jpg"))

    def test_empty_url(self):
        self.assertFalse(delete_profile_photo(None))
        self.assertFalse(delete_profile_photo(""))

    def test_errors_are_not_raised(self):
        with patch(
            "academy.helpers.files.os.remove",
            side_effect=PermissionError("read-only"),
        ):
            self.assertFalse(delete_profile_photo("uploads/photos/me.jpg"))

    def test_s3_storage(self):
        app.config["PROFILE_PHOTO_STORAGE"] = "s3"
        with patch(
            "academy.helpers.s3.S3Client.object_exists", return_value=True
        ), patch("academy.helpers.s3.S3Client.delete_object") as delete_object:
            self.assertTrue(delete_profile_photo("/uploads/photos/me.jpg"))
        delete_object.assert_called_once_with("uploads/photos/me.jpg")
        self.assertTrue(os.path.exists(self.photo_path))
