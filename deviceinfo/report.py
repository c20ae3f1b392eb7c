"""Device info block layout."""

from typing import Union

from .device import Device
from .formatting import ByteFormat, format_value


def render_device(device: Device, fmt: Union[str, ByteFormat] = ByteFormat.HEX) -> list[str]:
    """Render the info block for a device, one string per output line."""
    fmt = ByteFormat.parse(fmt)
    lines = [
        "",
        f"  Application ID: {device.app_id}",
        f"       Device ID: {device.dev_id}",
    ]
    lorawan = device.lorawan
    if lorawan is None:
        return lines

    lines += [
        f"       Last Seen: {lorawan.last_seen_text()}",
        "",
        "    LoRaWAN Info:",
        "",
        f"     AppEUI: {format_value(lorawan.app_eui, fmt)}",
        f"     DevEUI: {format_value(lorawan.dev_eui, fmt)}",
        f"    DevAddr: {format_value(lorawan.dev_addr, fmt)}",
        f"     AppKey: {format_value(lorawan.app_key, fmt)}",
        f"    AppSKey: {format_value(lorawan.app_s_key, fmt)}",
        f"    NwkSKey: {format_value(lorawan.nwk_s_key, fmt)}",
        f"     FCntUp: {lorawan.f_cnt_up}",
        f"   FCntDown: {lorawan.f_cnt_down}",
        f"    Options: {', '.join(lorawan.options())}",
    ]
    return lines
