import random

import pytest

from totp_auth.auth.secret import generate_shared_secret, random_base32
from totp_auth.config import BASE32_ALPHABET
from totp_auth.utils.encoding import decode_base32


class FixedRandom:
    """Deterministic stand-in that hands out values in order"""

    def __init__(self, values):
        self.values = iter(values)

    def randrange(self, stop):
        return next(self.values) % stop


@pytest.mark.parametrize("length, expected", [(1, 2), (2, 2), (15, 16), (16, 16), (33, 34)])
def test_odd_lengths_are_rounded_up(length, expected):
    assert len(random_base32(length)) == expected


def test_only_alphabet_characters():
    secret = random_base32(512)
    assert set(secret) <= set(BASE32_ALPHABET)


def test_generated_secret_decodes():
    secret = random_base32(32)
    assert len(decode_base32(secret)) == 20


def test_secrets_do_not_repeat():
    secrets_seen = {random_base32(32) for _ in range(500)}
    assert len(secrets_seen) == 500


def test_seeded_rng_is_reproducible():
    assert random_base32(16, rng=random.Random(1234)) == random_base32(16, rng=random.Random(1234))
    assert random_base32(16, rng=random.Random(1234)) != random_base32(16, rng=random.Random(4321))


def test_symbols_follow_draw_order():
    assert random_base32(32, rng=FixedRandom(range(32))) == BASE32_ALPHABET
    assert random_base32(4, rng=FixedRandom([0, 0, 0, 0])) == "AAAA"


@pytest.mark.parametrize("length", [0, -2, 2.5, "16", None, True])
def test_invalid_length(length):
    with pytest.raises(ValueError):
        random_base32(length)


def test_generate_shared_secret():
    secret = generate_shared_secret()
    assert len(secret) == 16
    assert set(secret) <= set(BASE32_ALPHABET)
    assert len(decode_base32(secret)) == 10


def test_generate_shared_secret_with_rng():
    assert generate_shared_secret(rng=random.Random(7)) == random_base32(16, rng=random.Random(7))
