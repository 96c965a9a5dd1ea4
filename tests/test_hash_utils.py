import hashlib
import hmac

from totp_auth.crypto.hash_utils import codes_equal, hmac_sha1


def test_hmac_sha1_matches_stdlib():
    key = b"12345678901234567890"
    message = b"\x00" * 7 + b"\x01"
    assert hmac_sha1(key, message) == hmac.new(key, message, hashlib.sha1).digest()


def test_hmac_sha1_digest_is_20_bytes():
    assert len(hmac_sha1(b"key", b"message")) == 20


def test_rfc2202_vector():
    digest = hmac_sha1(b"Jefe", b"what do ya want for nothing?")
    assert digest.hex() == "effcdf6ae5eb2fa2d27416d5f184df9c259a7c79"


def test_codes_equal():
    assert codes_equal("123456", "123456")
    assert not codes_equal("123456", "123457")
    assert not codes_equal("123456", "12345")
