import json
import logging

import pytest

from deviceinfo.__main__ import get_arg_parser, main


@pytest.fixture
def store(tmp_path):
    path = tmp_path / "devices.json"
    path.write_text(json.dumps({"devices": [{
        "app_id": "test-app",
        "dev_id": "sensor",
        "lorawan_device": {"dev_addr": "01020304", "app_key": None},
    }]}))
    return str(path)


def test_format_defaults_to_hex():
    args = get_arg_parser().parse_args(["sensor"])
    assert args.format == "hex"


def test_unknown_format_is_rejected_by_parser(capsys):
    with pytest.raises(SystemExit) as excinfo:
        get_arg_parser().parse_args(["sensor", "--format", "base64"])
    assert excinfo.value.code == 2
    assert "invalid choice" in capsys.readouterr().err


def test_show_device(store, capsys):
    main(["sensor", "-a", "test-app", "-s", store, "-f", "lsb"])
    out = capsys.readouterr().out
    assert "     AppKey: <nil>" in out
    assert "    DevAddr: {0x04, 0x03, 0x02, 0x01} (lsb first)" in out


def test_app_id_from_environment(store, capsys, monkeypatch):
    monkeypatch.setenv("DEVICEINFO_APP_ID", "test-app")
    main(["sensor", "-s", store])
    assert "    DevAddr: 01020304" in capsys.readouterr().out


@pytest.mark.parametrize("argv, message", [
    (["Bad ID", "-a", "test-app"], "Invalid Device ID"),
    (["sensor", "-a", ""], "Missing AppID"),
    (["missing", "-a", "test-app"], "not found"),
])
def test_fatal_errors(store, caplog, argv, message):
    caplog.set_level(logging.INFO)
    with pytest.raises(SystemExit) as excinfo:
        main(argv + ["-s", store])
    assert excinfo.value.code == 1
    assert message in caplog.text


def test_out_of_range_last_seen_is_fatal(tmp_path, caplog):
    path = tmp_path / "devices.json"
    path.write_text(json.dumps([{
        "app_id": "test-app",
        "dev_id": "sensor",
        "lorawan_device": {"last_seen": 10**22},
    }]))
    with pytest.raises(SystemExit) as excinfo:
        main(["sensor", "-a", "test-app", "-s", str(path)])
    assert excinfo.value.code == 1
    assert "last_seen out of range" in caplog.text
