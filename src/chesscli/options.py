"""Command line options for chesscli.

Arguments follow a strict ``-tag [value]`` pattern. Anything starting with
'-' is a tag; anything else is a value and must follow a value tag.

Boolean tags:  -chess960, -random, -repeat
Value tags:    -concurrency <int>, -games <int>, -openings <path>

Example:
    >>> options = parse_options(["-games", "10", "-openings", "book.epd"])
    >>> options.games, options.openings.value
    (10, b'book.epd')

"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from chesscli.errors import OptionsError
from chesscli.strbuf import StrBuf
from chesscli.strbuf.fmt import INT_BITS
from chesscli.utils.logger import get_logger

logger = get_logger(__name__)

_INT_MIN = -(1 << (INT_BITS - 1))
_INT_MAX = (1 << (INT_BITS - 1)) - 1

BOOL_TAGS: dict[str, str] = {
    "-chess960": "chess960",
    "-random": "random",
    "-repeat": "repeat",
}

VALUE_TAGS: dict[str, str] = {
    "-concurrency": "concurrency",
    "-games": "games",
    "-openings": "openings",
}


@dataclass
class Options:
    """Parsed command line options.

    Owns the openings buffer; call release() when done.

    Attributes:
        chess960: Play Chess960 (Fischer random) games
        concurrency: Number of games played in parallel
        games: Number of games to play
        openings: Path of the opening book (empty for none)
        random: Pick openings at random
        repeat: Play each opening twice, colors reversed

    """

    chess960: bool = False
    concurrency: int = 1
    games: int = 1
    openings: StrBuf = field(default_factory=StrBuf)
    random: bool = False
    repeat: bool = False

    def release(self) -> None:
        """Release the buffers owned by these options."""
        self.openings.release()


def _parse_int(tag: str, value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise OptionsError(
            f"integer expected after '{tag}'. found '{value}' instead.",
            tag=tag,
            value=value,
        ) from None
    if not _INT_MIN <= number <= _INT_MAX:
        raise OptionsError(f"value '{value}' for '{tag}' is out of range.", tag=tag, value=value)
    return number


def _apply_value(options: Options, tag: str, value: str) -> None:
    name = VALUE_TAGS[tag]
    if name == "openings":
        options.openings.copy(value)
    else:
        setattr(options, name, _parse_int(tag, value))


def parse_options(args: Sequence[str]) -> Options:
    """Parse command line arguments (program name excluded).

    Args:
        args: Argument list, e.g. sys.argv[1:]

    Returns:
        Options with defaults for anything not given

    Raises:
        OptionsError: Unknown tag, misplaced tag or value, missing value,
            or a malformed integer
    """
    options = Options()
    pending: str | None = None
    previous: str | None = None

    try:
        for arg in args:
            if arg.startswith("-"):
                if pending is not None:
                    raise OptionsError(
                        f"value expected after '{pending}'. found tag '{arg}' instead.",
                        tag=pending,
                        value=arg,
                    )
                if arg in VALUE_TAGS:
                    pending = arg
                elif arg in BOOL_TAGS:
                    setattr(options, BOOL_TAGS[arg], True)
                else:
                    raise OptionsError(f"invalid tag '{arg}'", tag=arg)
            else:
                if pending is None:
                    where = f" after '{previous}'" if previous is not None else ""
                    raise OptionsError(
                        f"tag expected{where}. found value '{arg}' instead.",
                        tag=previous,
                        value=arg,
                    )
                _apply_value(options, pending, arg)
                pending = None
            previous = arg

        if pending is not None:
            raise OptionsError(f"value expected after '{pending}'", tag=pending)
    except OptionsError:
        options.release()
        raise

    logger.debug("parsed options: %r", options)
    return options


__all__ = ["BOOL_TAGS", "Options", "VALUE_TAGS", "parse_options"]
