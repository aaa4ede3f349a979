"""Terminal message helpers for the WRAPTEST CLI.

One-line status messages with an emoji glyph (ASCII when stderr cannot encode
it). Everything goes to stderr because ``wraptest rewrite`` prints rewritten
source on stdout.
"""

import click

CAUTION = ("⚠️", "[!]")  # pragma: no mutate
SUCCESS = ("✅", "[OK]")  # pragma: no mutate
FAILURE = ("❌", "[X]")  # pragma: no mutate


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on the current stderr stream.

    The stream is looked up on every call, so a redirected or replaced stderr
    is always honored.
    """
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    try:
        character.encode(getattr(stream, "encoding"))
    except UnicodeEncodeError:
        return False
    return True


def _glyph(pair: tuple[str, str]) -> str:
    emoji, fallback = pair
    return emoji if _supports_character(emoji) else fallback


def caution_glyph() -> str:
    """Return "⚠️", or "[!]" on streams that cannot encode it."""
    return _glyph(CAUTION)


def success_glyph() -> str:
    """Return "✅", or "[OK]" on streams that cannot encode it."""
    return _glyph(SUCCESS)


def error_glyph() -> str:
    """Return "❌", or "[X]" on streams that cannot encode it."""
    return _glyph(FAILURE)


def warn(msg: str) -> None:
    """Write a bold yellow warning line to stderr.

    Example:
        ``⚠️  tests/test_api.py has no wraptest directive.``
    """
    click.secho(f"{caution_glyph()}  {msg}", fg="yellow", bold=True, err=True)


def success(msg: str) -> None:
    """Write a bold green success line to stderr.

    Example:
        ``✅  tests/test_api.py: 3 tests can be wrapped.``
    """
    click.secho(f"{success_glyph()}  {msg}", fg="green", bold=True, err=True)


def error(msg: str) -> None:
    """Write a bold red error line to stderr.

    Example:
        ``❌  tests/test_api.py: 2 tests cannot be wrapped.``
    """
    click.secho(f"{error_glyph()}  {msg}", fg="red", bold=True, err=True)
