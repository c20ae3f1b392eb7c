"""
Byte sequence formatting.

Renders identifiers and keys (EUIs, device addresses, session keys) as
uppercase hex or as C-style byte arrays in either byte order.
"""

import enum
from typing import Union

from .exceptions import UnknownFormatError
from .hex_encoding import byte_to_hex, reverse_bytes

NIL = "<nil>"


class ByteFormat(str, enum.Enum):
    """Operator-selectable byte formats."""
    HEX = "hex"
    MSB = "msb"
    LSB = "lsb"

    @classmethod
    def parse(cls, selector: Union[str, 'ByteFormat']) -> 'ByteFormat':
        """Resolve a selector string, raising UnknownFormatError if it is not a known format."""
        try:
            return cls(selector)
        except ValueError:
            raise UnknownFormatError(selector) from None

    def __str__(self) -> str:
        return self.value


class ByteSequence:
    """A value backed by an ordered sequence of bytes that may be unset."""

    def __init__(self, data: bytes = b'', empty: bool = False):
        self._data = bytes(data)
        self._empty = empty

    @property
    def data(self) -> bytes:
        return self._data

    def is_empty(self) -> bool:
        """True when the value is logically unset, whatever its byte content."""
        return self._empty

    def __eq__(self, other):
        if not isinstance(other, ByteSequence):
            return NotImplemented
        return self._empty == other._empty and self._data == other._data

    def __hash__(self):
        return hash((self._empty, self._data))

    def __str__(self) -> str:
        return NIL if self._empty else byte_to_hex(self._data)

    def __repr__(self) -> str:
        if self._empty:
            return f"{type(self).__name__}()"
        return f"{type(self).__name__}({byte_to_hex(self._data)})"


class Opaque:
    """A non-byte field value, displayed with its default string form."""

    def __init__(self, display_value):
        self.display_value = display_value

    def __str__(self) -> str:
        return str(self.display_value)


def c_style(data: bytes, msb_first: bool = True) -> str:
    """Render bytes as a C array literal, e.g. {0x01, 0x02}."""
    if not msb_first:
        data = reverse_bytes(data)
    return "{" + ", ".join(f"0x{b:02X}" for b in data) + "}"


def format_value(value: Union[ByteSequence, Opaque, object], fmt: Union[str, ByteFormat]) -> str:
    """Render a field value in the requested byte format.

    Values that are not byte sequences fall back to str(). Unset byte
    sequences render as <nil> in every format.
    """
    fmt = ByteFormat.parse(fmt)
    if not isinstance(value, ByteSequence):
        return str(value)
    if value.is_empty():
        return NIL

    if fmt is ByteFormat.MSB:
        return c_style(value.data, msb_first=True) + " (msb first)"
    elif fmt is ByteFormat.LSB:
        return c_style(value.data, msb_first=False) + " (lsb first)"
    return byte_to_hex(value.data)
