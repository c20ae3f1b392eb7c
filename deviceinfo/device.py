"""
Device descriptor model.

Parses the structured device record returned by the device store into
typed fields.
"""

import re
from datetime import datetime, timedelta, timezone
from typing import Optional

from .exceptions import InvalidDescriptor
from .lorawan import AES128Key, DevAddr, EUI64

ID_PATTERN = re.compile(r'[0-9a-z](?:[_-]?[0-9a-z]){1,35}')

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

UINT32_MAX = 2**32 - 1
INT64_MAX = 2**63 - 1


def valid_id(text: str) -> bool:
    """Check an application or device ID: lowercase alphanumerics with single _ or - separators."""
    return bool(ID_PATTERN.fullmatch(text or ''))


def _int_field(record: dict, name: str, maximum: int) -> int:
    """Read an unsigned integer field; int64 fields may arrive as JSON strings."""
    value = record.get(name)
    if value is None or value == '':
        return 0
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    value = int(value)
    if not 0 <= value <= maximum:
        raise ValueError(f"{name} out of range: {value}")
    return value


def _bool_field(record: dict, name: str) -> bool:
    value = record.get(name)
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.lower() in ('true', 'false'):
        return value.lower() == 'true'
    raise ValueError(f"{name} must be a boolean, got {value!r}")


class LorawanDevice:
    """LoRaWAN section of a device descriptor."""

    def __init__(self, app_eui: Optional[EUI64] = None, dev_eui: Optional[EUI64] = None,
                 dev_addr: Optional[DevAddr] = None, app_key: Optional[AES128Key] = None,
                 app_s_key: Optional[AES128Key] = None, nwk_s_key: Optional[AES128Key] = None,
                 f_cnt_up: int = 0, f_cnt_down: int = 0,
                 disable_f_cnt_check: bool = False, uses32_bit_f_cnt: bool = False,
                 last_seen: int = 0):
        self.app_eui = app_eui if app_eui is not None else EUI64()
        self.dev_eui = dev_eui if dev_eui is not None else EUI64()
        self.dev_addr = dev_addr if dev_addr is not None else DevAddr()
        self.app_key = app_key if app_key is not None else AES128Key()
        self.app_s_key = app_s_key if app_s_key is not None else AES128Key()
        self.nwk_s_key = nwk_s_key if nwk_s_key is not None else AES128Key()
        self.f_cnt_up = f_cnt_up
        self.f_cnt_down = f_cnt_down
        self.disable_f_cnt_check = disable_f_cnt_check
        self.uses32_bit_f_cnt = uses32_bit_f_cnt
        self.last_seen = last_seen  # nanoseconds since the epoch, 0 = never

    @classmethod
    def from_record(cls, record: dict) -> 'LorawanDevice':
        try:
            return cls(
                app_eui=EUI64.from_hex(record.get('app_eui')),
                dev_eui=EUI64.from_hex(record.get('dev_eui')),
                dev_addr=DevAddr.from_hex(record.get('dev_addr')),
                app_key=AES128Key.from_hex(record.get('app_key')),
                app_s_key=AES128Key.from_hex(record.get('app_s_key')),
                nwk_s_key=AES128Key.from_hex(record.get('nwk_s_key')),
                f_cnt_up=_int_field(record, 'f_cnt_up', UINT32_MAX),
                f_cnt_down=_int_field(record, 'f_cnt_down', UINT32_MAX),
                disable_f_cnt_check=_bool_field(record, 'disable_f_cnt_check'),
                uses32_bit_f_cnt=_bool_field(record, 'uses32_bit_f_cnt'),
                last_seen=_int_field(record, 'last_seen', INT64_MAX),
            )
        except (AttributeError, TypeError, ValueError, OverflowError) as e:
            raise InvalidDescriptor(f"invalid lorawan_device record: {e}") from e

    def options(self) -> list[str]:
        """Names of the enabled frame counter options."""
        options = []
        if self.disable_f_cnt_check:
            options.append("DisableFCntCheck")
        if self.uses32_bit_f_cnt:
            options.append("Uses32BitFCnt")
        return options

    def last_seen_text(self) -> str:
        if self.last_seen <= 0:
            return "never"
        return str(EPOCH + timedelta(microseconds=self.last_seen // 1000))


class Device:
    """A registered device: application/device IDs plus the optional LoRaWAN section."""

    def __init__(self, app_id: str, dev_id: str, lorawan: Optional[LorawanDevice] = None):
        self.app_id = app_id
        self.dev_id = dev_id
        self.lorawan = lorawan

    @classmethod
    def from_record(cls, record: dict) -> 'Device':
        if not isinstance(record, dict):
            raise InvalidDescriptor(f"device record must be an object, got {type(record).__name__}")
        app_id = record.get('app_id')
        dev_id = record.get('dev_id')
        if not app_id or not dev_id:
            raise InvalidDescriptor("device record is missing app_id or dev_id")
        lorawan = record.get('lorawan_device')
        return cls(
            str(app_id),
            str(dev_id),
            LorawanDevice.from_record(lorawan) if lorawan is not None else None,
        )

    def __repr__(self) -> str:
        return f"Device({self.app_id}/{self.dev_id})"
