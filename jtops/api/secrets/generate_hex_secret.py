"""Hex secret generation from the OS cryptographic random source."""

import secrets


def generate_hex_secret(num_bytes: int) -> str:
    """Return ``num_bytes`` fresh random bytes as a lowercase hex string.

    The result is ``2 * num_bytes`` characters long. Errors from the random
    source (``OSError``, ``NotImplementedError``) propagate unchanged.
    """
    if num_bytes <= 0:
        raise ValueError(f"num_bytes must be positive (found: {num_bytes})")
    return secrets.token_hex(num_bytes)
