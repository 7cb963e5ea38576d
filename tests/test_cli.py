"""Tests for the Typer CLI."""
from pathlib import Path

import pytest
from typer.testing import CliRunner

from msgview.cli import settings
from msgview.cli.app import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove msgview settings from the environment."""
    for name in ("MSGVIEW_START_DIR", "MSGVIEW_ENCODING", "MSGVIEW_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


class TestSettings:
    """Tests for environment configuration."""

    def test_defaults(self):
        assert settings.get_start_dir() is None
        assert settings.get_encoding() == "utf-8"
        assert settings.get_log_level() is None

    def test_values_from_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("MSGVIEW_START_DIR", str(tmp_path))
        monkeypatch.setenv("MSGVIEW_ENCODING", "latin-1")
        monkeypatch.setenv("MSGVIEW_LOG_LEVEL", "INFO")

        assert settings.get_start_dir() == tmp_path
        assert settings.get_encoding() == "latin-1"
        assert settings.get_log_level() == "info"

    def test_unknown_log_level_is_ignored(self, monkeypatch):
        monkeypatch.setenv("MSGVIEW_LOG_LEVEL", "verbose")

        assert settings.get_log_level() is None


class TestCheckCommand:
    """Tests for `msgview check`."""

    def test_valid_file(self, sample_chat_file):
        result = runner.invoke(app, ["check", str(sample_chat_file)])

        assert result.exit_code == 0
        assert "Chat log is valid" in result.output
        assert "Messages" in result.output
        assert "Alice, Bob" in result.output

    def test_corrupt_file(self, corrupt_chat_file):
        result = runner.invoke(app, ["check", str(corrupt_chat_file)])

        assert result.exit_code == 1
        assert "corrupt or broken" in result.output

    def test_wrong_extension(self, wrong_extension_file):
        result = runner.invoke(app, ["check", str(wrong_extension_file)])

        assert result.exit_code == 1
        assert "invalid format" in result.output

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["check", str(tmp_path / "missing.msg")])

        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_encoding_from_environment(self, monkeypatch, tmp_path):
        chat_file = tmp_path / "latin.msg"
        chat_file.write_bytes("Time:1\nName:Jos\xe9\nMessage:hi\n".encode("latin-1"))
        monkeypatch.setenv("MSGVIEW_ENCODING", "latin-1")

        result = runner.invoke(app, ["check", str(chat_file)])

        assert result.exit_code == 0
        assert "Jos\xe9" in result.output


class TestShowCommand:
    """Tests for `msgview show`."""

    def test_prints_rendered_chat(self, sample_chat_file):
        result = runner.invoke(app, ["show", str(sample_chat_file)])

        assert result.exit_code == 0
        assert "[14:02]Alice: hi" in result.output
        assert "[14:03]...are you around?" in result.output
        assert "[14:05]Bob: yes" in result.output

    def test_empty_file(self, tmp_path):
        chat_file = tmp_path / "empty.msg"
        chat_file.write_text("")

        result = runner.invoke(app, ["show", str(chat_file)])

        assert result.exit_code == 0
        assert "No messages" in result.output

    def test_corrupt_file(self, corrupt_chat_file):
        result = runner.invoke(app, ["show", str(corrupt_chat_file)])

        assert result.exit_code == 1
        assert "corrupt or broken" in result.output


class TestViewCommand:
    """Tests for `msgview view` argument handling."""

    @pytest.fixture
    def calls(self, monkeypatch):
        """Replace the viewer launcher and record its arguments."""
        recorded = []
        monkeypatch.setattr("msgview.ui.run_chat_viewer", lambda **kwargs: recorded.append(kwargs))
        return recorded

    def test_passes_options(self, calls, sample_chat_file, tmp_path):
        result = runner.invoke(app, [
            "view", str(sample_chat_file), "--start-dir", str(tmp_path), "--log-level", "info",
        ])

        assert result.exit_code == 0
        assert calls == [{
            "initial_file": sample_chat_file,
            "start_dir": tmp_path,
            "log_level": "info",
            "encoding": "utf-8",
        }]

    def test_falls_back_to_environment(self, calls, monkeypatch, tmp_path):
        monkeypatch.setenv("MSGVIEW_START_DIR", str(tmp_path))
        monkeypatch.setenv("MSGVIEW_LOG_LEVEL", "debug")

        result = runner.invoke(app, ["view"])

        assert result.exit_code == 0
        assert calls[0]["initial_file"] is None
        assert calls[0]["start_dir"] == Path(tmp_path)
        assert calls[0]["log_level"] == "debug"

    def test_rejects_unknown_log_level(self, calls):
        result = runner.invoke(app, ["view", "--log-level", "loud"])

        assert result.exit_code == 1
        assert calls == []
