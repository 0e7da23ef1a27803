"""Test the command line entry point."""

import logging
from unittest.mock import patch

import pytest
from linepad import __main__ as cli
from linepad.errors import DisplayError, FileOpenError, UsageError
from linepad.settings import EditorSettings


def test_parse_args():
    assert cli.parse_args([]) == (None, False)
    assert cli.parse_args(["notes.txt"]) == ("notes.txt", False)
    assert cli.parse_args(["--debug", "notes.txt"]) == ("notes.txt", True)


def test_parse_args_rejects_two_files():
    with pytest.raises(UsageError):
        cli.parse_args(["a.txt", "b.txt"])


def test_parse_args_rejects_unknown_option():
    with pytest.raises(UsageError):
        cli.parse_args(["--frobnicate"])


def test_main_usage_error_exit_code(capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["a.txt", "b.txt"])
    assert excinfo.value.code == 1
    assert "Usage: linepad" in capsys.readouterr().err


def test_main_version(capsys):
    with patch.object(cli, 'get_version_string', return_value="linepad 0.1.0"):
        cli.main(["--version"])
    assert capsys.readouterr().out.strip() == "linepad 0.1.0"


@pytest.fixture
def quiet_logging():
    """Keep log files and settings out of the user's directories."""
    with patch('linepad.settings.SettingsStore.load', return_value=EditorSettings()):
        with patch.object(cli, 'configure_logging') as configure:
            yield configure


def test_main_runs_editor(quiet_logging):
    with patch('linepad.editor.Editor') as editor_cls:
        cli.main(["doc.txt"])
    editor = editor_cls.return_value
    editor.load_file.assert_called_once_with("doc.txt")
    editor.run.assert_called_once()
    editor.offer_save.assert_called_once()


def test_main_debug_sets_level(quiet_logging):
    with patch('linepad.editor.Editor'):
        cli.main(["--debug"])
    quiet_logging.assert_called_once_with("DEBUG")


def test_main_load_failure_exit_code(quiet_logging, capsys):
    with patch('linepad.editor.Editor') as editor_cls:
        editor_cls.return_value.load_file.side_effect = FileOpenError("doc.txt", "No such file or directory")
        with pytest.raises(SystemExit) as excinfo:
            cli.main(["doc.txt"])
    assert excinfo.value.code == 2
    editor_cls.return_value.run.assert_not_called()
    assert "FileOpenError: Cannot open doc.txt" in capsys.readouterr().err


def test_main_display_failure_exit_code(quiet_logging):
    with patch('linepad.editor.Editor') as editor_cls:
        editor_cls.return_value.run.side_effect = DisplayError("not a terminal")
        with pytest.raises(SystemExit) as excinfo:
            cli.main([])
    assert excinfo.value.code == 3


def test_configure_logging_writes_file(tmp_path):
    logger = logging.getLogger("linepad")
    old_handlers = list(logger.handlers)
    old_level = logger.level
    try:
        log_file = cli.configure_logging("INFO", log_dir=tmp_path / "logs")
        logging.getLogger("linepad.storage").info("hello from test")
        for handler in logger.handlers:
            handler.flush()
        assert log_file.exists()
        assert "hello from test" in log_file.read_text(encoding='utf-8')
    finally:
        for handler in logger.handlers:
            if handler not in old_handlers:
                handler.close()
                logger.removeHandler(handler)
        logger.setLevel(old_level)


def test_version_string_names_package():
    from linepad.version import get_version_string
    with patch('linepad.version.get_commit', return_value="abc1234-dirty"):
        version = get_version_string()
    assert version.startswith("linepad ")
    assert version.endswith("(abc1234-dirty)")


def test_main_loads_file_with_bare_carriage_returns(quiet_logging, tmp_path):
    from linepad.editor import Editor
    path = tmp_path / "mac.txt"
    path.write_bytes(b"abc\rdef\n")
    with patch.object(Editor, 'run', autospec=True) as run:
        cli.main([str(path)])
    editor = run.call_args.args[0]
    assert editor.buffer.lines == ("abc", "def")
    assert editor.filename == str(path)
