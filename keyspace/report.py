"""
keyspace.report

Turn a StrengthResult into the two report lines and print them.
"""

from typing import IO, List, Optional

from rich.console import Console

from .estimator import StrengthResult

COMBINATIONS_LINE = "There are {combinations} combinations"
BITS_LINE = "That is equivalent to a key of {bits} bits"

# str(int) refuses very large values on recent interpreters, so long numbers
# are converted in fixed-size decimal chunks.
_CHUNK_DIGITS = 1000
_CHUNK = 10 ** _CHUNK_DIGITS


def format_integer(n: int) -> str:
    """Plain decimal digits of a non-negative integer, no exponent or separators."""
    if n < 0:
        raise ValueError("n must be >= 0")
    parts = []
    while n >= _CHUNK:
        n, low = divmod(n, _CHUNK)
        parts.append(str(low).zfill(_CHUNK_DIGITS))
    parts.append(str(n))
    return "".join(reversed(parts))


def format_report(result: StrengthResult) -> List[str]:
    return [
        COMBINATIONS_LINE.format(combinations=format_integer(result.combinations)),
        BITS_LINE.format(bits=result.bits),
    ]


def make_console(file: Optional[IO[str]] = None, stderr: bool = False) -> Console:
    """Console for plain report text: no markup parsing, no highlighting, no wrapping."""
    return Console(
        file=file,
        stderr=stderr,
        markup=False,
        emoji=False,
        highlight=False,
        soft_wrap=True,
    )


def print_report(result: StrengthResult, console: Optional[Console] = None) -> None:
    console = console or make_console()
    for line in format_report(result):
        console.print(line)
