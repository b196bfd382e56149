from typing import Union

from py_steam_guard import exceptions
from py_steam_guard.crypto import hmac_sha1
from py_steam_guard.utils import current_time, decode_secret, encode_code, pack_counter, time_step, truncate


def get_hmac(secret: Union[str, bytes], time: Union[int, float]) -> bytes:
    """
    Compute the HMAC-SHA1 of the time step counter.

    Args:
        secret (Union[str, bytes]): the shared secret in base64.
        time (Union[int, float]): a Unix timestamp.

    Returns:
        bytes: the 20-byte digest.

    Raises:
        InvalidSecret: when the secret isn't valid base64.
        KeySetupError: when the keyed hash can't be initialized with the key.
        CounterError: when the counter can't be packed.

    """
    key = decode_secret(secret)
    counter = pack_counter(time_step(time))
    try:
        return hmac_sha1(key, counter)

    except (ValueError, TypeError) as e:
        raise exceptions.KeySetupError(str(e)) from e


def generate_auth_code_for_time(secret: Union[str, bytes], time: Union[int, float]) -> str:
    """
    Generate a Steam Guard code for the specified time.

    Args:
        secret (Union[str, bytes]): the shared secret in base64.
        time (Union[int, float]): a Unix timestamp.

    Returns:
        str: the 5-character code.

    Raises:
        GuardException: any problem with the secret or the hash computation.

    """
    return encode_code(truncate(get_hmac(secret, time)))


def generate_auth_code(secret: Union[str, bytes]) -> str:
    """
    Generate a Steam Guard code for the current time.

    Args:
        secret (Union[str, bytes]): the shared secret in base64.

    Returns:
        str: the 5-character code.

    """
    return generate_auth_code_for_time(secret, current_time())
