# fixup/core/cdn.py
import logging
import time
from datetime import datetime, timedelta, timezone

import boto3
from botocore.exceptions import ClientError
from botocore.signers import CloudFrontSigner
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import padding

from fixup.core.config import AWSConfig, CDNConfig

logger = logging.getLogger(__name__)


class CloudFrontURLSigner:
    """Signs picture URLs with a canned CloudFront policy."""

    def __init__(self, cfg: CDNConfig):
        self.cfg = cfg
        self._signer = None

    def _rsa_signer(self, message: bytes) -> bytes:
        private_key = serialization.load_pem_private_key(self.cfg.private_key.encode(), password=None)
        return private_key.sign(message, padding.PKCS1v15(), hashes.SHA1())

    def sign_url(self, picture: str) -> str:
        if self._signer is None:
            self._signer = CloudFrontSigner(self.cfg.key_pair_id, self._rsa_signer)

        expires = datetime.now(timezone.utc) + timedelta(seconds=self.cfg.expiry)
        return self._signer.generate_presigned_url(self.cfg.url_fmt.format(picture), date_less_than=expires)


class CloudFrontInvalidator:
    def __init__(self, cfg: AWSConfig, client=None):
        self.cdn_client = client or boto3.client(
            "cloudfront",
            aws_access_key_id=cfg.access_key_id,
            aws_secret_access_key=cfg.secret_access_key,
            region_name=cfg.region,
        )
        self.distribution_id = cfg.cdn.distribution_id

    def invalidate_file(self, key: str) -> None:
        try:
            self.cdn_client.create_invalidation(
                DistributionId=self.distribution_id,
                InvalidationBatch={
                    "Paths": {"Quantity": 1, "Items": ["/" + key]},
                    "CallerReference": f"{key}-{time.time_ns()}",
                },
            )
        except ClientError as e:
            logger.error("Failed to invalidate %s: %s", key, e)
            raise
