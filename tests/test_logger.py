import re

from stellargen.logger import LogLevel, Logger, configure, format_message, get_logger

NO_CMD = 0xFF & ~LogLevel.DISP_CMD


def _lines(path):
    return path.read_text(encoding="utf-8").splitlines()


def test_format_plain():
    assert format_message(LogLevel.ERROR, "boom", "12:00:00", False) == "[12:00:00] ERROR : boom"


def test_format_colored():
    text = format_message(LogLevel.FATAL, "boom", "01:02:03", True)
    assert text == "\033[90m[01:02:03] \033[91mFATAL\033[37m : boom\033[0m"


def test_format_unknown_level():
    text = format_message(LogLevel.ERROR | LogLevel.FATAL, "m", "t", False)
    assert text == "[t] UNKNOWN : m"


def test_log_to_file(tmp_path):
    path = tmp_path / "log.txt"
    logger = Logger(path, NO_CMD)
    logger.log(LogLevel.ERROR, "boom")
    logger.close()
    lines = _lines(path)
    assert lines[0].endswith("INFO : Logger created")
    assert re.match(r"^\[\d\d:\d\d:\d\d\] ERROR : boom$", lines[1])
    assert lines[-1].endswith("INFO : Logger destroyed")


def test_disabled_level_not_written(tmp_path):
    path = tmp_path / "log.txt"
    with Logger(path, NO_CMD) as logger:
        logger.set_level(LogLevel.DEBUG, False)
        logger.log(LogLevel.DEBUG, "hidden")
        logger.log(LogLevel.WARNING, "shown")
        assert logger.is_display(LogLevel.DEBUG) is False
    content = path.read_text(encoding="utf-8")
    assert "hidden" not in content
    assert "WARNING : shown" in content


def test_console_output(tmp_path, capsys):
    logger = Logger(tmp_path / "log.txt", LogLevel.FATAL | LogLevel.DISP_CMD)
    logger.log(LogLevel.FATAL, "meltdown")
    logger.close()
    out = capsys.readouterr().out
    assert "meltdown" in out
    assert "FATAL" in out
    assert "Logger created" not in out


def test_unopenable_file_disables_txt(tmp_path):
    logger = Logger(tmp_path / "missing" / "a.log", NO_CMD)
    assert logger.is_display(LogLevel.DISP_TXT) is False
    logger.set_display_txt(True)
    assert logger.is_display(LogLevel.DISP_TXT) is False
    logger.set_level(LogLevel.DISP_TXT, True)
    assert logger.is_display(LogLevel.DISP_TXT) is False


def test_set_display_cmd_toggles_state(tmp_path):
    logger = Logger(tmp_path / "log.txt", NO_CMD)
    assert logger.state & LogLevel.DISP_CMD == 0
    logger.set_display_cmd(True)
    assert logger.is_display(LogLevel.DISP_CMD)
    logger.set_display_cmd(False)
    assert logger.state == NO_CMD
    logger.close()


def test_close_is_idempotent(tmp_path):
    path = tmp_path / "log.txt"
    logger = Logger(path, NO_CMD)
    logger.close()
    logger.close()
    assert sum("Logger destroyed" in line for line in _lines(path)) == 1


def test_get_logger_is_shared(tmp_path):
    configure(NO_CMD, tmp_path / "shared.log")
    first = get_logger()
    assert get_logger() is first
    assert first.is_display(LogLevel.DISP_CMD) is False