"""Test the command-line entry point."""

from unittest.mock import MagicMock, patch

from rezvan.__main__ import _escape_bytes, main


def test_version_flag(capsys):
    with patch("rezvan.__main__.get_version_string", return_value="1.2.3"):
        assert main(["--version"]) == 0
        assert main(["-V"]) == 0
    assert capsys.readouterr().out == "1.2.3\n1.2.3\n"


def test_escape_bytes():
    assert _escape_bytes("\x1b[A") == "\\x1b[A"
    assert _escape_bytes("a") == "a"


def test_opens_file_and_runs_editor(tmp_path):
    editor = MagicMock()
    with patch("rezvan.editor.Editor", return_value=editor), \
            patch("rezvan.config.load_config"), \
            patch("rezvan.config.setup_logging"):
        assert main([str(tmp_path / "doc.txt")]) == 0
    editor.load_file.assert_called_once_with(str(tmp_path / "doc.txt"))
    editor.run.assert_called_once_with()


def test_load_failure_exits_with_error(capsys):
    editor = MagicMock()
    editor.load_file.side_effect = IsADirectoryError("Is a directory")
    with patch("rezvan.editor.Editor", return_value=editor), \
            patch("rezvan.config.load_config"), \
            patch("rezvan.config.setup_logging"):
        assert main(["somewhere"]) == 1
    assert "Error loading file" in capsys.readouterr().err
    editor.run.assert_not_called()


def test_no_terminal_exits_with_error(capsys):
    editor = MagicMock()
    editor.run.side_effect = RuntimeError("rezvan needs an interactive terminal")
    with patch("rezvan.editor.Editor", return_value=editor), \
            patch("rezvan.config.load_config"), \
            patch("rezvan.config.setup_logging"):
        assert main([]) == 1
    assert "interactive terminal" in capsys.readouterr().err
