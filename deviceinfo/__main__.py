"""
deviceinfo - CLI entry point.

Usage:
    python -m deviceinfo [-a <APP_ID>] [-s <STORE>] [-f hex|msb|lsb] [-d] <DEV_ID>

Arguments:
    DEV_ID          Device ID to look up
    -a, --app-id    Application ID (default: $DEVICEINFO_APP_ID)
    -s, --store     Device store JSON export (default: $DEVICEINFO_STORE or ./devices.json)
    -f, --format    Byte formatting: hex/msb/lsb (default: hex)
    -d, --debug     Verbose logging
    -h, --help      Show this help message
"""

import argparse
import logging
import os
import sys
from typing import Optional

from .device import valid_id
from .device_store import DeviceStore
from .exceptions import DeviceInfoError, InvalidDeviceId
from .formatting import ByteFormat
from .report import render_device

logger = logging.getLogger(__name__)

DEFAULT_STORE = 'devices.json'


def get_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='deviceinfo',
        description='Get information about a device',
    )
    parser.add_argument('dev_id', help='Device ID')
    parser.add_argument(
        '-a', '--app-id',
        default=os.environ.get('DEVICEINFO_APP_ID', ''),
        help='Application ID',
    )
    parser.add_argument(
        '-s', '--store',
        default=os.environ.get('DEVICEINFO_STORE', DEFAULT_STORE),
        help='Device store JSON export',
    )
    parser.add_argument(
        '-f', '--format',
        default=ByteFormat.HEX.value,
        choices=[f.value for f in ByteFormat],
        help='Formatting: hex/msb/lsb',
    )
    parser.add_argument('-d', '--debug', action='store_true', help='Verbose logging')
    return parser


def show_device(app_id: str, dev_id: str, store_path: str, byte_format: ByteFormat) -> None:
    """Look up a device and print its info block."""
    if not valid_id(dev_id):
        raise InvalidDeviceId(f"Invalid Device ID {dev_id!r}")
    if not app_id:
        raise DeviceInfoError("Missing AppID. Use --app-id or set DEVICEINFO_APP_ID")

    device = DeviceStore(store_path).get_device(app_id, dev_id)
    logger.info("Found device")
    for line in render_device(device, byte_format):
        print(line)


def main(argv: Optional[list[str]] = None) -> None:
    args = get_arg_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format='%(message)s',
    )

    try:
        show_device(args.app_id, args.dev_id, args.store, ByteFormat.parse(args.format))
    except DeviceInfoError as e:
        logger.error(f"Could not get device: {e}")
        sys.exit(1)


if __name__ == '__main__':
    main()
