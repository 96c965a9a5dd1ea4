"""
Exceptions raised by the TOTP modules
"""


class TOTPError(Exception):
    """Base class for all totp_auth errors"""


class InvalidSecretError(TOTPError, ValueError):
    """
    Raised when a shared secret is not valid base32

    character / position point at the first offending symbol when the
    failure comes from the alphabet check.
    """

    def __init__(self, message, character=None, position=None):
        super().__init__(message)
        self.character = character
        self.position = position
