"""
keyspace.prompt

Interactive password entry.

The terminal's ECHO flag is session-wide state, so it is only ever touched
through terminal_echo(), which puts echo back on however the block exits.
"""

import logging
import os
from contextlib import contextmanager
from typing import BinaryIO, Iterator, Optional

from rich.console import Console

try:
    import termios
except ImportError:  # Windows: no tty attributes to manage
    termios = None

log = logging.getLogger(__name__)

PROMPT = "Please enter the password: "
INVALID_ENTRY = "Invalid entry! Please try again!"

DEFAULT_MAX_ATTEMPTS = 5


class PasswordEntryError(Exception):
    """Base class for failures while reading the password."""


class EndOfInput(PasswordEntryError):
    """Input stream closed before a password was entered."""


class TooManyAttempts(PasswordEntryError):
    def __init__(self, attempts: int) -> None:
        self.attempts = attempts
        super().__init__(f"no valid entry after {attempts} attempt(s)")


def _tty_fd(stream) -> Optional[int]:
    if termios is None:
        return None
    try:
        fd = stream.fileno()
    except (AttributeError, OSError):
        return None
    return fd if os.isatty(fd) else None


@contextmanager
def terminal_echo(stream, enabled: bool = True) -> Iterator[None]:
    """
    Turn local echo on or off for the terminal behind `stream` for the
    duration of the block. Echo is always re-enabled on exit. Streams that
    are not terminals are left untouched.
    """
    fd = _tty_fd(stream)
    if fd is None:
        yield
        return

    attrs = termios.tcgetattr(fd)
    if enabled:
        attrs[3] |= termios.ECHO
    else:
        attrs[3] &= ~termios.ECHO
    termios.tcsetattr(fd, termios.TCSANOW, attrs)
    try:
        yield
    finally:
        attrs[3] |= termios.ECHO
        termios.tcsetattr(fd, termios.TCSANOW, attrs)


def read_line(stream: BinaryIO, encoding: str = "utf-8") -> str:
    """
    Read one line (spaces and tabs included) and return it without its
    LF or CRLF line ending. Raises EndOfInput if the stream is already
    exhausted and UnicodeDecodeError if the line is not valid in `encoding`.
    """
    raw = stream.readline()
    if not raw:
        raise EndOfInput("end of input before a password was entered")
    if raw.endswith(b"\r\n"):
        raw = raw[:-2]
    elif raw.endswith(b"\n"):
        raw = raw[:-1]
    return raw.decode(encoding)


def prompt_password(
    stream: BinaryIO,
    console: Console,
    show: bool = True,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    encoding: str = "utf-8",
) -> str:
    """
    Prompt until a line can be read. An undecodable line is discarded and
    the user is asked again; after `max_attempts` failures TooManyAttempts
    is raised (0 retries forever).
    """
    attempt = 0
    with terminal_echo(stream, enabled=show):
        while True:
            attempt += 1
            console.print(PROMPT, end="")
            try:
                password = read_line(stream, encoding)
            except UnicodeDecodeError as e:
                log.debug("attempt %d: undecodable entry (%s)", attempt, e.reason)
                if not show:
                    console.print()
                if max_attempts and attempt >= max_attempts:
                    raise TooManyAttempts(attempt) from e
                console.print(INVALID_ENTRY)
                continue
            if not show:
                # the user's Enter was not echoed
                console.print()
            log.debug("attempt %d: read %d characters", attempt, len(password))
            return password
