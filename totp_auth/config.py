"""
Protocol constants and enrollment settings
"""
import os
import re
from dataclasses import dataclass


# Fixed by the authenticator convention; changing any of these breaks
# compatibility with standard clients.
TIME_STEP = 30
DIGITS = 6

BASE32_ALPHABET = 'ABCDEFGHIJKLMNOPQRSTUVWXYZ234567'

DEFAULT_ISSUER = 'Dharma.AI'
DEFAULT_ICON_URL = 'https://dharma.ai/wp-content/uploads/2018/06/favicon-150x150.png'
DEFAULT_CHART_BASE_URL = 'https://chart.googleapis.com/chart'
DEFAULT_QR_SIZE = '300x300'
DEFAULT_ERROR_CORRECTION = 'M'

ERROR_CORRECTION_LEVELS = ('L', 'M', 'Q', 'H')

_QR_SIZE_PATTERN = re.compile(r'^[1-9][0-9]*x[1-9][0-9]*$')


@dataclass(frozen=True)
class TOTPConfig:
    """Settings used when building enrollment URLs"""

    issuer: str = DEFAULT_ISSUER
    icon_url: str = DEFAULT_ICON_URL
    chart_base_url: str = DEFAULT_CHART_BASE_URL
    qr_size: str = DEFAULT_QR_SIZE
    error_correction: str = DEFAULT_ERROR_CORRECTION

    def __post_init__(self):
        if not self.issuer:
            raise ValueError('issuer must not be empty')
        if not self.chart_base_url:
            raise ValueError('chart_base_url must not be empty')
        if not _QR_SIZE_PATTERN.match(self.qr_size):
            raise ValueError(f'qr_size must look like 300x300, got {self.qr_size!r}')
        if self.error_correction not in ERROR_CORRECTION_LEVELS:
            raise ValueError(
                f'error_correction must be one of {", ".join(ERROR_CORRECTION_LEVELS)}, '
                f'got {self.error_correction!r}'
            )

    @classmethod
    def from_env(cls, environ=None):
        """
        Build a config from TOTP_* environment variables

        Unset variables fall back to the defaults. An empty
        TOTP_ICON_URL turns the icon off.
        """
        if environ is None:
            environ = os.environ

        return cls(
            issuer=environ.get('TOTP_ISSUER', DEFAULT_ISSUER),
            icon_url=environ.get('TOTP_ICON_URL', DEFAULT_ICON_URL),
            chart_base_url=environ.get('TOTP_CHART_BASE_URL', DEFAULT_CHART_BASE_URL),
            qr_size=environ.get('TOTP_QR_SIZE', DEFAULT_QR_SIZE),
            error_correction=environ.get('TOTP_QR_ERROR_CORRECTION', DEFAULT_ERROR_CORRECTION).upper(),
        )
