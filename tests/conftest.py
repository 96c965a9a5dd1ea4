import base64
import time

import pytest

# RFC 4226 / RFC 6238 SHA1 test key "12345678901234567890"
RFC_SECRET = base64.b32encode(b"12345678901234567890").decode()


@pytest.fixture
def rfc_secret():
    return RFC_SECRET


@pytest.fixture
def frozen_clock(monkeypatch):
    """Pin time.time() to a value; call the fixture again to move it"""
    def freeze(timestamp):
        monkeypatch.setattr(time, "time", lambda: timestamp)
    return freeze
