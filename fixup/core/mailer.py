# fixup/core/mailer.py
import logging
import smtplib
from email.message import EmailMessage
from pathlib import Path
from string import Template

from fixup.core.config import MailerConfig

logger = logging.getLogger(__name__)


def load_template(path: str) -> Template:
    return Template(Path(path).read_text(encoding="utf-8"))


class SMTPMailer:
    def __init__(self, cfg: MailerConfig):
        self.cfg = cfg

    def _connect(self) -> smtplib.SMTP:
        if self.cfg.use_ssl:
            return smtplib.SMTP_SSL(self.cfg.host, self.cfg.port)
        smtp = smtplib.SMTP(self.cfg.host, self.cfg.port)
        smtp.starttls()
        return smtp

    def send_html(self, from_email: str, to_email: str, subject: str, template: Template, data: dict):
        msg = EmailMessage()
        msg["Subject"] = subject
        msg["From"] = from_email
        msg["To"] = to_email
        msg.set_content(template.safe_substitute(data), subtype="html")

        with self._connect() as smtp:
            if self.cfg.user:
                smtp.login(self.cfg.user, self.cfg.password)
            smtp.send_message(msg)
        logger.info("Sent '%s' to %s", subject, to_email)


class DevMailer(SMTPMailer):
    """Redirects every letter back to the sender address."""

    def send_html(self, from_email: str, to_email: str, subject: str, template: Template, data: dict):
        logger.debug("Redirecting '%s' for %s to %s", subject, to_email, from_email)
        super().send_html(from_email, from_email, subject, template, data)


def new_mailer(cfg: MailerConfig, production: bool) -> SMTPMailer:
    if production:
        return SMTPMailer(cfg)
    return DevMailer(cfg)
