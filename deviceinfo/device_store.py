"""
Device store reader.

Reads a JSON export of registered devices, either {"devices": [...]} or a
bare list of device records, and looks devices up by application and
device ID.
"""

import json
import logging

from .device import Device
from .exceptions import DeviceNotFound, InvalidDescriptor, StoreError

logger = logging.getLogger(__name__)


class DeviceStore:
    """Lookup of device descriptors from a JSON export file."""

    def __init__(self, filename: str):
        self._filename = filename
        self._records: list[dict] = []
        self._parsed = False

    def parse(self) -> None:
        """Load the export file."""
        try:
            with open(self._filename, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except OSError as e:
            raise StoreError(f"cannot read device store {self._filename}: {e}") from e
        except json.JSONDecodeError as e:
            raise StoreError(f"invalid JSON in device store {self._filename}: {e}") from e

        if isinstance(data, dict):
            data = data.get('devices', [])
        if not isinstance(data, list):
            raise StoreError(f"device store {self._filename} must hold a list of devices")

        self._records = data
        self._parsed = True
        logger.debug(f"Loaded {len(self._records)} device record(s) from {self._filename}")

    def get_device(self, app_id: str, dev_id: str) -> Device:
        """Find the device with the given IDs."""
        if not self._parsed:
            self.parse()
        for record in self._records:
            if not isinstance(record, dict):
                continue
            if record.get('app_id') == app_id and record.get('dev_id') == dev_id:
                try:
                    return Device.from_record(record)
                except InvalidDescriptor as e:
                    raise StoreError(f"bad record for {app_id}/{dev_id}: {e}") from e
        raise DeviceNotFound(app_id, dev_id)
