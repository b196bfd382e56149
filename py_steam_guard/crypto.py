from Crypto.Hash import HMAC, SHA1


def hmac_sha1(secret: bytes, data: bytes) -> bytes:
    return HMAC.new(secret, data, SHA1).digest()
