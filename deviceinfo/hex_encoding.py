"""Hex encoding/decoding and byte order utilities."""


def byte_to_hex(data: bytes) -> str:
    """Convert bytes to an uppercase hex string."""
    return data.hex().upper()


def hex_to_byte(hex_str: str) -> bytes:
    """Convert hex string to bytes."""
    if len(hex_str) % 2 != 0:
        raise ValueError("uneven hex length")
    return bytes.fromhex(hex_str)


def reverse_bytes(data: bytes) -> bytes:
    """Return a copy of data in reverse byte order (MSB-first <-> LSB-first)."""
    return bytes(reversed(data))
