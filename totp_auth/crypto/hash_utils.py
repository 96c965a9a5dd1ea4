"""
HMAC utilities for one-time password derivation using SHA-1
"""
from cryptography.hazmat.primitives import hashes, hmac
from cryptography.hazmat.primitives.constant_time import bytes_eq


def hmac_sha1(key, message):
    """
    Compute HMAC-SHA1 of message keyed by key
    Both arguments should be bytes; returns the 20-byte digest
    """
    mac = hmac.HMAC(key, hashes.SHA1())
    mac.update(message)
    return mac.finalize()


def codes_equal(expected, received):
    """Compare two codes without leaking timing information"""
    return bytes_eq(expected.encode('ascii'), received.encode('ascii'))
