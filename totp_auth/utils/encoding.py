"""
Base32 decoding utilities for TOTP shared secrets
"""
import logging

from totp_auth.config import BASE32_ALPHABET
from totp_auth.exceptions import InvalidSecretError

logger = logging.getLogger(__name__)

_SYMBOL_VALUES = {symbol: index for index, symbol in enumerate(BASE32_ALPHABET)}


def _symbol_values(secret):
    """
    Map every character of the secret to its 5-bit value
    Raises InvalidSecretError on the first character outside the alphabet
    """
    values = []
    for position, character in enumerate(secret):
        value = _SYMBOL_VALUES.get(character.upper()) if character.isascii() else None
        if value is None:
            logger.warning('Rejected base32 secret: invalid character at position %d', position)
            raise InvalidSecretError(
                f'Invalid base32 character {character!r} at position {position}',
                character=character,
                position=position,
            )
        values.append(value)
    return values


def decode_base32_hex(secret):
    """
    Decode a base32 string into a lowercase hex string

    Bits are regrouped into nibbles from the start; trailing bits that
    do not fill a whole nibble are dropped, so N symbols give
    floor(5N/4) hex digits.
    """
    values = _symbol_values(secret)

    nibbles = []
    buffer = 0
    bits = 0
    for value in values:
        buffer = (buffer << 5) | value
        bits += 5
        while bits >= 4:
            bits -= 4
            nibbles.append((buffer >> bits) & 0x0F)
        buffer &= (1 << bits) - 1

    return ''.join(format(nibble, 'x') for nibble in nibbles)


def decode_base32(secret):
    """
    Decode a base32 string into raw key bytes
    An odd trailing nibble does not form a byte and is dropped
    """
    hex_digits = decode_base32_hex(secret)
    return bytes.fromhex(hex_digits[:len(hex_digits) - len(hex_digits) % 2])
