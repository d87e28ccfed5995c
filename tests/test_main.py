import json
import sys
import pytest
from unittest.mock import MagicMock
from PyQt6.QtCore import QCoreApplication
from main import main
from core.config import AppConfig


@pytest.fixture(scope="module")
def app():
    return QCoreApplication.instance() or QCoreApplication(sys.argv)


@pytest.fixture
def cfg_path(tmp_path):
    return tmp_path / "config.json"


def test_table_to_stdout(app, cfg_path, capsys):
    assert main(["--config", str(cfg_path)], logger=MagicMock()) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == ""
    assert out[1] == "Parameter group 'Voice Edit':"
    assert out[2] == '"0";"OP1 Attack Rate";"43 11 12 00 VV"'
    assert "Parameter group 'Operator on/off':" in out
    assert '"93";"OP 1-4 on/off";"43 11 12 5D VV"' in out


def test_options_override_config(app, cfg_path, capsys):
    cfg_path.write_text(json.dumps({"channel": 3, "delimiter": ","}))
    assert main(["--config", str(cfg_path), "--no-headings", "--device-id", "7D",
                 "--data-value", "10"], logger=MagicMock()) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == '"0","OP1 Attack Rate","7D 13 12 00 0A"'
    assert len(out) == 86 + 1 + 23


def test_output_and_syx_files(app, cfg_path, tmp_path):
    table_path = tmp_path / "table.txt"
    syx_path = tmp_path / "table.syx"
    code = main(["--config", str(cfg_path), "-o", str(table_path),
                 "--data-value", "0", "--syx", str(syx_path)], logger=MagicMock())
    assert code == 0
    assert '"0";"OP1 Attack Rate";"43 11 12 00 00"' in table_path.read_text()
    data = syx_path.read_bytes()
    assert data[:7] == bytes([0xF0, 0x43, 0x11, 0x12, 0x00, 0x00, 0xF7])
    assert data.count(0xF0) == 86 + 1 + 23


def test_syx_requires_data_value(app, cfg_path, tmp_path):
    with pytest.raises(SystemExit) as exc_info:
        main(["--config", str(cfg_path), "--syx", str(tmp_path / "x.syx")])
    assert exc_info.value.code == 2


def test_encode_error_returns_2(app, cfg_path, capsys):
    logger = MagicMock()
    assert main(["--config", str(cfg_path), "--channel", "16"], logger=logger) == 2
    logger.codec.assert_called_once()
    assert "nnnn" in logger.codec.call_args[0][0]


def test_syx_with_non_7bit_device_id_returns_2(app, cfg_path, tmp_path):
    logger = MagicMock()
    syx_path = tmp_path / "bad.syx"
    code = main(["--config", str(cfg_path), "--device-id", "F0", "--data-value", "0",
                 "--no-headings", "-o", str(tmp_path / "table.txt"),
                 "--syx", str(syx_path)], logger=logger)
    assert code == 2
    logger.codec.assert_called_once()
    assert "0..127" in logger.codec.call_args[0][0]
    assert not syx_path.exists()


def test_single_group(app, cfg_path, capsys):
    assert main(["--config", str(cfg_path), "--no-headings",
                 "--group", "Operator on/off"], logger=MagicMock()) == 0
    assert capsys.readouterr().out.splitlines() == ['"93";"OP 1-4 on/off";"43 11 12 5D VV"']


def test_unknown_group_is_usage_error(app, cfg_path):
    with pytest.raises(SystemExit) as exc_info:
        main(["--config", str(cfg_path), "--group", "Nope"], logger=MagicMock())
    assert exc_info.value.code == 2


def test_list_groups(app, cfg_path, capsys):
    assert main(["--config", str(cfg_path), "--list-groups"], logger=MagicMock()) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Voice Edit: group 4, subgroup 2, parameters 0-85",
        "Operator on/off: group 4, subgroup 2, parameters 93-93",
        "Voice Edit Additional Parameters: group 4, subgroup 3, parameters 0-22",
    ]


def test_save_config_stores_overrides(app, cfg_path):
    assert main(["--config", str(cfg_path), "--channel", "2", "--delimiter", ",",
                 "--save-config", "-o", str(cfg_path.parent / "t.txt")],
                logger=MagicMock()) == 0
    cfg = AppConfig(path=cfg_path)
    assert cfg.channel == 2
    assert cfg.delimiter == ","
