import base64
import struct
import time
from typing import Union

from py_steam_guard import exceptions
from py_steam_guard.models import GuardCode


def current_time() -> int:
    """
    Get the current Unix time.

    Returns:
        int: whole seconds since the epoch, wrapped to 32 bits.

    Raises:
        ClockError: when the system clock is set to before the Unix epoch.

    """
    timestamp = int(time.time())
    if timestamp < 0:
        raise exceptions.ClockError('System time is set to before unix epoch')

    return timestamp & GuardCode.U32_MASK


def time_step(timestamp: Union[int, float]) -> int:
    """
    Convert a timestamp to the number of complete periods since the epoch.

    Args:
        timestamp (Union[int, float]): a Unix timestamp, wrapped to 32 bits.

    Returns:
        int: the time step.

    """
    return (int(timestamp) & GuardCode.U32_MASK) // GuardCode.PERIOD


def decode_secret(secret: Union[str, bytes]) -> bytes:
    """
    Decode a base64 shared secret.

    Args:
        secret (Union[str, bytes]): the shared secret in standard base64.

    Returns:
        bytes: the raw key.

    Raises:
        InvalidSecret: when the secret isn't valid base64.

    """
    try:
        return base64.b64decode(secret, validate=True)

    except (ValueError, TypeError) as e:
        raise exceptions.InvalidSecret(f'Secret can not be decoded from base64: {e}') from e


def pack_counter(step: int) -> bytes:
    # 64-bit big-endian counter, the high half is always zero
    try:
        return struct.pack('>II', 0, step)

    except struct.error as e:
        raise exceptions.CounterError(str(e)) from e


def truncate(digest: bytes) -> int:
    """
    Extract a 31-bit integer from an HMAC digest (RFC 4226 dynamic truncation).

    Args:
        digest (bytes): the 20-byte HMAC-SHA1 digest.

    Returns:
        int: the truncated value.

    Raises:
        CounterError: when the digest is too short to read the window.

    """
    try:
        start = digest[19] & 0xF
        return struct.unpack('>I', digest[start:start + 4])[0] & GuardCode.MASK

    except (IndexError, struct.error) as e:
        raise exceptions.CounterError(f'Digest is too short: {len(digest)} bytes') from e


def encode_code(value: int) -> str:
    charset = GuardCode.CHARSET
    code = ''
    for _ in range(GuardCode.LENGTH):
        value, i = divmod(value, len(charset))
        code += charset[i]

    return code
