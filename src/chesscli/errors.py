"""Exception classes for chesscli.

Provides standardized exceptions for error handling throughout chesscli.

Invariant errors signal caller defects and are never caught inside the
library. Allocation and options errors are environmental or user-facing and
may be recovered by the caller.
"""

from __future__ import annotations


class ChessCliError(Exception):
    """Base exception for all chesscli errors.

    Subclass this for specific error categories.
    """

    pass


class InvariantError(ChessCliError):
    """A buffer invariant or an internal contract was violated.

    Raised on misuse: operating on a released buffer, an empty delimiter
    set, a corrupted buffer. Reaching one means the calling code is wrong.
    """

    pass


class UnsupportedSpecifierError(InvariantError):
    """Format template contains a specifier the engine does not know."""

    def __init__(self, specifier: bytes, template: bytes) -> None:
        """Initialize with the offending specifier.

        Args:
            specifier: The byte(s) following '%' (empty for a trailing '%')
            template: The full format template
        """
        self.specifier = specifier
        self.template = template

        if specifier:
            shown = "%" + specifier.decode("latin-1")
            message = f"unsupported format specifier {shown!r}"
        else:
            message = "format template ends with a lone '%'"
        super().__init__(f"{message} in {template!r}")


class FormatArgumentError(InvariantError):
    """Format arguments do not match the template.

    Raised for a missing or surplus argument, an argument of the wrong
    kind, or an integer outside the range of its specifier.
    """

    pass


class AllocationError(ChessCliError, MemoryError):
    """Buffer storage could not grow to the requested capacity."""

    def __init__(self, requested: int, limit: int | None = None) -> None:
        """Initialize allocation error.

        Args:
            requested: Capacity in bytes that was requested
            limit: Configured capacity limit, if that is what failed
        """
        self.requested = requested
        self.limit = limit

        if limit is not None:
            message = f"cannot allocate {requested} bytes (limit is {limit})"
        else:
            message = f"cannot allocate {requested} bytes"
        super().__init__(message)


class OptionsError(ChessCliError):
    """Malformed command line arguments.

    Carries the offending tag and value, when known, so the entry point can
    report them.
    """

    def __init__(
        self,
        message: str,
        tag: str | None = None,
        value: str | None = None,
    ) -> None:
        """Initialize options error.

        Args:
            message: Error description
            tag: Tag involved in the error (optional)
            value: Value involved in the error (optional)
        """
        self.message = message
        self.tag = tag
        self.value = value
        super().__init__(message)
