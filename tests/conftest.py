import pytest

# RFC 4226 Appendix D secret, base64-encoded
RFC_SECRET = 'MTIzNDU2Nzg5MDEyMzQ1Njc4OTA='


@pytest.fixture
def secret():
    return '000000000000000000000000000='


@pytest.fixture
def rfc_secret():
    return RFC_SECRET
