from functools import lru_cache

import boto3

from academy import app


@lru_cache(maxsize=1)
def _s3():
    return boto3.client(
        "s3",
        endpoint_url=app.config["S3_ENDPOINT"],
        region_name=app.config["S3_REGION"],
        aws_access_key_id=app.config["S3_ACCESS_KEY"],
        aws_secret_access_key=app.config["S3_SECRET_KEY"],
    )


class S3Client:
    @staticmethod
    def object_exists(key):
        response = _s3().list_objects_v2(
            Bucket=app.config["S3_BUCKET_NAME"], Prefix=key, MaxKeys=1
        )
        return any(item["Key"] == key for item in response.get("Contents", []))

    @staticmethod
    def delete_object(key):
        _s3().delete_object(Bucket=app.config["S3_BUCKET_NAME"], Key=key)
