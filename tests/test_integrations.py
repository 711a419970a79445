"""
Tests for the S3, CloudFront, SMTP and Redis adapters
"""

import io
from string import Template
from unittest.mock import MagicMock, patch
from urllib.parse import parse_qs, urlparse

import pytest
from botocore.exceptions import ClientError
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from fixup.core.cdn import CloudFrontInvalidator, CloudFrontURLSigner
from fixup.core.config import AWSConfig, CDNConfig, MailerConfig
from fixup.core.mailer import DevMailer, SMTPMailer, load_template, new_mailer
from fixup.core.storage import S3Storage
from fixup.repositories.verification import VerificationRepository


def client_error(operation):
    return ClientError({"Error": {"Code": "AccessDenied", "Message": "denied"}}, operation)


# -------------------------
# S3
# -------------------------

def test_put_object_generates_random_name():
    client = MagicMock()
    storage = S3Storage(AWSConfig(bucket="media", random_name_size=8), client=client)

    key = storage.put_object(io.BytesIO(b"img"), "pfp/", "image/png")

    assert key.startswith("pfp/")
    assert len(key) == len("pfp/") + 16
    kwargs = client.put_object.call_args.kwargs
    assert kwargs["Bucket"] == "media"
    assert kwargs["Key"] == key
    assert kwargs["ContentType"] == "image/png"


def test_put_object_with_explicit_name():
    client = MagicMock()
    storage = S3Storage(AWSConfig(), client=client)

    assert storage.put_object(io.BytesIO(b"img"), "pfp/", "image/png", "avatar") == "pfp/avatar"


def test_put_object_failure_propagates():
    client = MagicMock()
    client.put_object.side_effect = client_error("PutObject")
    storage = S3Storage(AWSConfig(), client=client)

    with pytest.raises(ClientError):
        storage.put_object(io.BytesIO(b"img"), "pfp/", "image/png")


def test_delete_object():
    client = MagicMock()
    storage = S3Storage(AWSConfig(bucket="media"), client=client)

    storage.delete_object("pfp/abc")

    client.delete_object.assert_called_once_with(Bucket="media", Key="pfp/abc")


# -------------------------
# CloudFront
# -------------------------

def test_invalidate_file():
    client = MagicMock()
    invalidator = CloudFrontInvalidator(AWSConfig(cdn=CDNConfig(distribution_id="E123")), client=client)

    invalidator.invalidate_file("pfp/abc")

    kwargs = client.create_invalidation.call_args.kwargs
    assert kwargs["DistributionId"] == "E123"
    assert kwargs["InvalidationBatch"]["Paths"] == {"Quantity": 1, "Items": ["/pfp/abc"]}


def test_invalidate_file_failure_propagates():
    client = MagicMock()
    client.create_invalidation.side_effect = client_error("CreateInvalidation")
    invalidator = CloudFrontInvalidator(AWSConfig(), client=client)

    with pytest.raises(ClientError):
        invalidator.invalidate_file("pfp/abc")


def test_sign_url():
    key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    pem = key.private_bytes(
        serialization.Encoding.PEM,
        serialization.PrivateFormat.TraditionalOpenSSL,
        serialization.NoEncryption(),
    ).decode()
    signer = CloudFrontURLSigner(CDNConfig(url_fmt="https://cdn.example.com/{}", key_pair_id="KP1", private_key=pem))

    url = signer.sign_url("pfp/abc")

    parsed = urlparse(url)
    query = parse_qs(parsed.query)
    assert parsed.netloc == "cdn.example.com"
    assert parsed.path == "/pfp/abc"
    assert query["Key-Pair-Id"] == ["KP1"]
    assert "Signature" in query
    assert "Expires" in query


# -------------------------
# Mail
# -------------------------

def test_load_template():
    template = load_template("templates/register_confirm.html")

    body = template.safe_substitute({"name": "Nino", "link": "http://localhost/verify?token=abc"})

    assert "Nino" in body
    assert "http://localhost/verify?token=abc" in body


def test_smtp_mailer_sends_html():
    mailer = SMTPMailer(MailerConfig(host="smtp.example.com", port=465, user="bot", password="pw"))

    with patch("fixup.core.mailer.smtplib.SMTP_SSL") as smtp_ssl:
        mailer.send_html("noreply@fixup.local", "nino@example.com", "Hi", Template("Hello $name"), {"name": "Nino"})

    smtp_ssl.assert_called_once_with("smtp.example.com", 465)
    smtp = smtp_ssl.return_value.__enter__.return_value
    smtp.login.assert_called_once_with("bot", "pw")
    msg = smtp.send_message.call_args.args[0]
    assert msg["To"] == "nino@example.com"
    assert msg["Subject"] == "Hi"
    assert "Hello Nino" in msg.get_content()


def test_smtp_mailer_starttls_without_login():
    mailer = SMTPMailer(MailerConfig(host="smtp.example.com", port=587, use_ssl=False))

    with patch("fixup.core.mailer.smtplib.SMTP") as smtp_plain:
        mailer.send_html("noreply@fixup.local", "nino@example.com", "Hi", Template("x"), {})

    smtp_plain.return_value.starttls.assert_called_once()
    smtp_plain.return_value.__enter__.return_value.login.assert_not_called()


def test_dev_mailer_redirects_to_sender():
    mailer = DevMailer(MailerConfig())

    with patch("fixup.core.mailer.smtplib.SMTP_SSL") as smtp_ssl:
        mailer.send_html("noreply@fixup.local", "nino@example.com", "Hi", Template("x"), {})

    msg = smtp_ssl.return_value.__enter__.return_value.send_message.call_args.args[0]
    assert msg["To"] == "noreply@fixup.local"


def test_new_mailer():
    assert type(new_mailer(MailerConfig(), production=True)) is SMTPMailer
    assert isinstance(new_mailer(MailerConfig(), production=False), DevMailer)


# -------------------------
# Redis
# -------------------------

def test_mark_token_used():
    client = MagicMock()
    client.set.return_value = True
    repository = VerificationRepository(client, 900)

    assert repository.mark_token_used("abc") is True
    client.set.assert_called_once_with("abc", "", nx=True, ex=900)


def test_mark_token_used_twice():
    client = MagicMock()
    client.set.return_value = None

    assert VerificationRepository(client, 900).mark_token_used("abc") is False


def test_is_token_used():
    client = MagicMock()
    client.exists.return_value = 1

    assert VerificationRepository(client, 900).is_token_used("abc") is True
