"""deviceinfo exceptions."""


class DeviceInfoError(Exception):
    """Base class for all deviceinfo exceptions."""


class UnknownFormatError(DeviceInfoError, ValueError):
    """The byte format selector is not one of hex/msb/lsb."""

    def __init__(self, selector):
        super().__init__(f"unknown byte format {selector!r}, expected one of hex, msb, lsb")
        self.selector = selector


class InvalidDeviceId(DeviceInfoError, ValueError):
    """The device or application ID is not syntactically valid."""


class InvalidDescriptor(DeviceInfoError):
    """A device record could not be parsed."""


class StoreError(DeviceInfoError):
    """The device store could not be read."""


class DeviceNotFound(StoreError):
    """No device with the requested ID exists in the store."""

    def __init__(self, app_id: str, dev_id: str):
        super().__init__(f"device {dev_id!r} not found in application {app_id!r}")
        self.app_id = app_id
        self.dev_id = dev_id
