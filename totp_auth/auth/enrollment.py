"""
Enrollment URLs for authenticator apps

The otpauth URI is wrapped into a request for an external QR chart
service; nothing here fetches or renders the image.
"""
import logging
from urllib.parse import quote

import pyotp

from totp_auth.config import TOTPConfig

logger = logging.getLogger(__name__)


def build_otpauth_uri(secret, account_label, config=None):
    """Get the otpauth:// provisioning URI for the secret and account"""
    if not account_label:
        raise ValueError('account_label must not be empty')
    if config is None:
        config = TOTPConfig()

    return pyotp.totp.TOTP(secret).provisioning_uri(
        name=account_label,
        issuer_name=config.issuer,
        image=config.icon_url or None,
    )


def build_enrollment_uri(secret, account_label, config=None):
    """
    Build the QR chart request URL for enrolling an account
    The chart service renders the otpauth URI passed in `chl`
    """
    if config is None:
        config = TOTPConfig()

    otpauth_uri = build_otpauth_uri(secret, account_label, config)
    logger.debug('Built enrollment URL for issuer %s, account %s', config.issuer, account_label)
    return (
        f'{config.chart_base_url}?chs={config.qr_size}'
        f'&chld={config.error_correction}|0&chr=qr&chl={quote(otpauth_uri, safe="")}'
    )
