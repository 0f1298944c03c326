import logging
import os

from academy import app

logger = logging.getLogger(__name__)

UPLOADS_PREFIXES = ("/uploads/", "./uploads/", "uploads/")


def extract_upload_path(url):
    """Return the `uploads/...` relative path a stored photo URL points to.

    URLs that do not live under the uploads directory give None.
    """
    if not url:
        return None
    for prefix in UPLOADS_PREFIXES:
        if url.startswith(prefix):
            return "uploads/" + url[len(prefix) :]
    return None


def _delete_local_file(relative_path):
    absolute_path = os.path.join(app.config["UPLOAD_ROOT"], relative_path)
    if not os.path.exists(absolute_path):
        logger.warning(f"File not found, skipping deletion: {absolute_path}")
        return False
    os.remove(absolute_path)
    logger.info(f"File deleted: {absolute_path}")
    return True


def _delete_s3_file(key):
    from academy.helpers.s3 import S3Client

    if not S3Client.object_exists(key):
        logger.warning(f"S3 object not found, skipping deletion: {key}")
        return False
    S3Client.delete_object(key)
    logger.info(f"S3 object deleted: {key}")
    return True


def delete_profile_photo(url):
    """Best-effort removal of a stored profile photo.

    Returns True only when a file was actually removed. Never raises.
    """
    relative_path = extract_upload_path(url)
    if not relative_path:
        return False
    try:
        if app.config["PROFILE_PHOTO_STORAGE"] == "s3":
            return _delete_s3_file(relative_path)
        return _delete_local_file(relative_path)
    except Exception as e:
        logger.warning(f"Failed to delete profile photo {url}: {e!r}")
        return False
