"""
Shared secret generation for TOTP enrollment
"""
import logging
import secrets

from totp_auth.config import BASE32_ALPHABET

logger = logging.getLogger(__name__)

SHARED_SECRET_LENGTH = 16


def random_base32(length, rng=None):
    """
    Generate a random base32 secret of `length` symbols

    Odd lengths are bumped to the next even number so the secret
    decodes into whole bytes. rng is anything with randrange(); it
    defaults to the operating system's secure source.
    """
    if isinstance(length, bool) or not isinstance(length, int) or length < 1:
        raise ValueError(f'length must be a positive integer, got {length!r}')

    if length % 2:
        length += 1

    if rng is None:
        rng = secrets.SystemRandom()

    secret = ''.join(BASE32_ALPHABET[rng.randrange(len(BASE32_ALPHABET))] for _ in range(length))
    logger.debug('Generated base32 secret of length %d', length)
    return secret


def generate_shared_secret(rng=None):
    """Generate an 80-bit shared secret (16 base32 symbols)"""
    return random_base32(SHARED_SECRET_LENGTH, rng=rng)
