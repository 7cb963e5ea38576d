"""Pytest configuration and shared fixtures."""
import pytest


@pytest.fixture
def sample_chat_text():
    """Return a well-formed chat log with a sender run."""
    return (
        "Time:14:02\n"
        "Name:Alice\n"
        "Message:hi :) there\n"
        "Time:14:03\n"
        "Name:Alice\n"
        "Message:are you around?\n"
        "Time:14:05\n"
        "Name:Bob\n"
        "Message:yes :(\n"
    )


@pytest.fixture
def sample_chat_file(tmp_path, sample_chat_text):
    """Create a temporary .msg file with the sample log."""
    chat_file = tmp_path / "chat.msg"
    chat_file.write_text(sample_chat_text, encoding="utf-8")
    return chat_file


@pytest.fixture
def corrupt_chat_file(tmp_path):
    """Create a .msg file whose second line has the wrong prefix."""
    chat_file = tmp_path / "broken.msg"
    chat_file.write_text("Time:14:02\nNick:Alice\nMessage:hi\n", encoding="utf-8")
    return chat_file


@pytest.fixture
def wrong_extension_file(tmp_path, sample_chat_text):
    """Create a well-formed log saved with a .txt extension."""
    chat_file = tmp_path / "chat.txt"
    chat_file.write_text(sample_chat_text, encoding="utf-8")
    return chat_file
