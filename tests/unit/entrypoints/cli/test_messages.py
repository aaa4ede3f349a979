"""Unit tests for wraptest.entrypoints.cli.helpers.messages.

The helpers pick an emoji or an ASCII fallback from whatever encoding
``click.get_text_stream("stderr")`` reports *now*, and write styled lines to
stderr so stdout stays free for rewritten source.
"""

import io
import sys

import click
import pytest

from wraptest.entrypoints.cli.helpers.messages import (
    _supports_character,
    caution_glyph,
    error,
    error_glyph,
    success,
    success_glyph,
    warn,
)

BOLD = "\x1b[1m"
RESET = "\x1b[0m"
COLORS = {"yellow": "\x1b[33m", "green": "\x1b[32m", "red": "\x1b[31m"}


class FakeTTY(io.StringIO):
    """StringIO that claims to be a terminal with a chosen encoding."""

    def __init__(self, encoding: str):
        super().__init__()
        self._encoding = encoding

    @property
    def encoding(self) -> str:
        return self._encoding

    def isatty(self) -> bool:
        return True


@pytest.fixture
def fake_stderr(monkeypatch):
    """Route both the encoding check and stderr writes to one FakeTTY."""

    def _install(encoding: str) -> FakeTTY:
        stream = FakeTTY(encoding)
        monkeypatch.setattr(click, "get_text_stream", lambda name: stream)
        monkeypatch.setattr(sys, "stderr", stream, raising=False)
        monkeypatch.delenv("NO_COLOR", raising=False)
        return stream

    return _install


@pytest.mark.parametrize(
    ("encoding", "glyphs"),
    [("ascii", ("[!]", "[OK]", "[X]")), ("utf-8", ("⚠️", "✅", "❌"))],
)
def test_glyphs_follow_encoding(fake_stderr, encoding, glyphs):
    """Emoji on UTF-8 streams, bracketed ASCII otherwise."""
    fake_stderr(encoding)
    assert (caution_glyph(), success_glyph(), error_glyph()) == glyphs


def test_stream_is_looked_up_every_time(monkeypatch):
    """A changed stderr encoding is seen by the next lookup."""
    encodings = iter(["ascii", "utf-8"])
    monkeypatch.setattr(click, "get_text_stream", lambda name: FakeTTY(next(encodings)))

    assert _supports_character("✅") is False
    assert _supports_character("✅") is True


@pytest.mark.parametrize(
    ("func", "color", "glyph"),
    [(warn, "yellow", "[!]"), (success, "green", "[OK]"), (error, "red", "[X]")],
)
def test_messages_are_bold_and_colored(fake_stderr, func, color, glyph):
    """Each helper writes one bold, colored line."""
    stream = fake_stderr("ascii")

    func("tests/test_api.py")

    out = stream.getvalue()
    assert out.endswith("tests/test_api.py" + RESET + "\n")
    assert glyph in out
    assert BOLD in out
    assert COLORS[color] in out


def test_messages_leave_stdout_alone(monkeypatch, capsys):
    """Messages are for humans and never mix with rewritten source."""
    monkeypatch.setattr(click, "get_text_stream", lambda name: FakeTTY("utf-8"))
    success("Wrote build/test_api.py")
    captured = capsys.readouterr()
    assert "Wrote build/test_api.py" in captured.err
    assert captured.out == ""
