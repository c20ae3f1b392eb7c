from deviceinfo.device import Device, LorawanDevice
from deviceinfo.lorawan import AES128Key, DevAddr, EUI64
from deviceinfo.report import render_device


def make_device():
    return Device("test-app", "sensor", LorawanDevice(
        app_eui=EUI64.from_hex("70B3D57EF0000001"),
        dev_addr=DevAddr.from_hex("01020304"),
        app_key=AES128Key(),
        f_cnt_up=5,
        uses32_bit_f_cnt=True,
    ))


def test_unset_app_key_and_lsb_dev_addr():
    lines = render_device(make_device(), "lsb")
    assert "     AppKey: <nil>" in lines
    assert "    DevAddr: {0x04, 0x03, 0x02, 0x01} (lsb first)" in lines


def test_full_block_hex():
    assert render_device(make_device()) == [
        "",
        "  Application ID: test-app",
        "       Device ID: sensor",
        "       Last Seen: never",
        "",
        "    LoRaWAN Info:",
        "",
        "     AppEUI: 70B3D57EF0000001",
        "     DevEUI: <nil>",
        "    DevAddr: 01020304",
        "     AppKey: <nil>",
        "    AppSKey: <nil>",
        "    NwkSKey: <nil>",
        "     FCntUp: 5",
        "   FCntDown: 0",
        "    Options: Uses32BitFCnt",
    ]


def test_device_without_lorawan_section():
    lines = render_device(Device("test-app", "sensor"))
    assert lines[-1] == "       Device ID: sensor"
    assert not any("LoRaWAN" in line for line in lines)
