# fixup/core/storage.py
import logging
import secrets
from typing import BinaryIO, Optional

import boto3
from botocore.exceptions import ClientError

from fixup.core.config import AWSConfig

logger = logging.getLogger(__name__)


class S3Storage:
    def __init__(self, cfg: AWSConfig, client=None):
        self.s3_client = client or boto3.client(
            "s3",
            aws_access_key_id=cfg.access_key_id,
            aws_secret_access_key=cfg.secret_access_key,
            region_name=cfg.region,
        )
        self.bucket_name = cfg.bucket
        self.name_size = cfg.random_name_size

    def put_object(self, file: BinaryIO, directory: str, content_type: str, file_name: Optional[str] = None) -> str:
        """Upload under ``directory`` and return the object key.

        A random hex name is generated when ``file_name`` is empty.
        """
        key = directory + (file_name or secrets.token_hex(self.name_size))
        try:
            self.s3_client.put_object(
                Bucket=self.bucket_name,
                Key=key,
                Body=file,
                ContentType=content_type,
            )
            return key
        except ClientError as e:
            logger.error("Failed to upload %s to S3: %s", key, e)
            raise

    def delete_object(self, key: str) -> None:
        try:
            self.s3_client.delete_object(Bucket=self.bucket_name, Key=key)
        except ClientError as e:
            logger.error("Failed to delete %s from S3: %s", key, e)
            raise
