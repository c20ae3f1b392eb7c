"""
LoRaWAN identifier and key types.

Each type is a fixed-length byte sequence in network (MSB-first) order.
"""

from typing import Optional

from .formatting import ByteSequence
from .hex_encoding import hex_to_byte


class FixedBytes(ByteSequence):
    """Base class for fixed-length LoRaWAN byte values."""

    SIZE = 0

    def __init__(self, data: Optional[bytes] = None):
        if data is None:
            # Unset values keep zero-filled storage so they still have a size.
            super().__init__(bytes(self.SIZE), empty=True)
            return
        if len(data) != self.SIZE:
            raise ValueError(f"{type(self).__name__} must be {self.SIZE} bytes, got {len(data)}")
        super().__init__(data)

    @classmethod
    def from_hex(cls, text: Optional[str]) -> 'FixedBytes':
        """Parse a hex string; None or "" gives an unset value."""
        if not text:
            return cls()
        return cls(hex_to_byte(text.strip()))


class EUI64(FixedBytes):
    """64-bit extended unique identifier (AppEUI, DevEUI)."""
    SIZE = 8


class DevAddr(FixedBytes):
    """32-bit device address."""
    SIZE = 4


class AES128Key(FixedBytes):
    """128-bit AES key (AppKey, AppSKey, NwkSKey)."""
    SIZE = 16
