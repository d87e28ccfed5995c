import sys
import pytest
from PyQt6.QtCore import QCoreApplication

@pytest.fixture(scope="module")
def app():
    return QCoreApplication.instance() or QCoreApplication(sys.argv)


from core.logger import AppLogger


def test_logger_emits_messages(app):
    logger = AppLogger()
    received = []
    logger.message_logged.connect(lambda cat, msg: received.append((cat, msg)))
    logger.log("CODEC", "Invalid value for mask 'x'")
    assert len(received) == 1
    assert received[0] == ("CODEC", "Invalid value for mask 'x'")


def test_logger_categories(app):
    logger = AppLogger()
    received = []
    logger.message_logged.connect(lambda cat, msg: received.append(cat))
    logger.codec("value too large")
    logger.table("group 'Voice Edit'")
    logger.general("Ready")
    assert received == ["CODEC", "TABLE", "GENERAL"]


def test_logger_writes_to_stderr(app, capsys):
    AppLogger().general("Ready")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "[GENERAL] Ready" in captured.err
