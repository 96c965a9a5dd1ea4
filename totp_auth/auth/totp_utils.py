"""
TOTP (Time-based One-Time Password) utilities compatible with Google Authenticator
"""
import logging
import math
import struct
import time

from totp_auth.config import DIGITS, TIME_STEP
from totp_auth.crypto.hash_utils import codes_equal, hmac_sha1
from totp_auth.exceptions import InvalidSecretError
from totp_auth.utils.encoding import decode_base32

logger = logging.getLogger(__name__)

_MAX_COUNTER = 2 ** 64 - 1


def _now(for_time):
    if for_time is None:
        return time.time()
    return for_time


def time_counter(for_time=None):
    """
    Number of 30-second steps since the epoch
    The timestamp is rounded to the nearest second before dividing
    """
    seconds = int(math.floor(_now(for_time) + 0.5))
    return seconds // TIME_STEP


def counter_bytes(counter):
    """Encode a counter as an 8-byte big-endian buffer"""
    if counter < 0 or counter > _MAX_COUNTER:
        raise ValueError(f'Counter out of range: {counter}')
    return struct.pack('>Q', counter)


def current_counter_bytes(for_time=None):
    """8-byte counter message for the current (or given) time"""
    return counter_bytes(time_counter(for_time))


def seconds_remaining(for_time=None):
    """Seconds left before the current code rolls over"""
    seconds = int(math.floor(_now(for_time) + 0.5))
    return TIME_STEP - seconds % TIME_STEP


def dynamic_truncate(digest):
    """
    Reduce an HMAC-SHA1 digest to a 6-digit code (RFC 4226 section 5.3)

    The low nibble of the last byte picks a 4-byte window; the top bit
    of that window is masked off before taking the last 6 decimal digits.
    """
    if len(digest) < 20:
        raise ValueError(f'Digest too short for truncation: {len(digest)} bytes')

    offset = digest[19] & 0x0F
    value = struct.unpack('>I', digest[offset:offset + 4])[0] & 0x7FFFFFFF
    return str(value)[-DIGITS:].zfill(DIGITS)


def _secret_key(secret):
    key = decode_base32(secret)
    if not key:
        raise InvalidSecretError('Secret decodes to an empty key')
    return key


def hotp(secret, counter):
    """Compute the code for an explicit counter value"""
    key = _secret_key(secret)
    digest = hmac_sha1(key, counter_bytes(counter))
    return dynamic_truncate(digest)


def compute_code(secret, for_time=None):
    """
    Calculate the TOTP code for the given secret

    for_time defaults to the current clock, read on every call.
    Raises InvalidSecretError if the secret is not valid base32.
    """
    return hotp(secret, time_counter(for_time))


def verify_totp(secret, code, window=1, for_time=None):
    """
    Verify a TOTP code against the secret

    Codes from up to `window` steps either side of the current one are
    accepted to allow for clock drift.
    """
    if window < 0:
        raise ValueError(f'window must not be negative, got {window}')
    if not secret or not code:
        return False

    code = str(code).strip()
    if len(code) != DIGITS or not code.isascii() or not code.isdigit():
        logger.debug('TOTP verification failed: malformed code')
        return False

    key = _secret_key(secret)
    current = time_counter(for_time)
    for drift in range(-window, window + 1):
        counter = current + drift
        if counter < 0 or counter > _MAX_COUNTER:
            continue
        expected = dynamic_truncate(hmac_sha1(key, counter_bytes(counter)))
        if codes_equal(expected, code):
            logger.debug('TOTP verified with drift %d', drift)
            return True

    logger.debug('TOTP verification failed: no match within window %d', window)
    return False
