"""
Time-based One-Time Password (TOTP) derivation and enrollment helpers
"""
import logging

from totp_auth.auth.enrollment import build_enrollment_uri, build_otpauth_uri
from totp_auth.auth.secret import generate_shared_secret, random_base32
from totp_auth.auth.totp_utils import (
    compute_code, counter_bytes, current_counter_bytes, dynamic_truncate,
    hotp, seconds_remaining, time_counter, verify_totp
)
from totp_auth.config import DIGITS, TIME_STEP, TOTPConfig
from totp_auth.exceptions import InvalidSecretError, TOTPError
from totp_auth.utils.encoding import decode_base32, decode_base32_hex

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = '1.0.0'

__all__ = [
    'DIGITS',
    'TIME_STEP',
    'InvalidSecretError',
    'TOTPConfig',
    'TOTPError',
    'build_enrollment_uri',
    'build_otpauth_uri',
    'compute_code',
    'counter_bytes',
    'current_counter_bytes',
    'decode_base32',
    'decode_base32_hex',
    'dynamic_truncate',
    'generate_shared_secret',
    'hotp',
    'random_base32',
    'seconds_remaining',
    'time_counter',
    'verify_totp',
]
