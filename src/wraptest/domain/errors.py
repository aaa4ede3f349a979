"""Domain-layer error definitions."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

# ============================================================================
#                               Base error
# ============================================================================


class WrapTestError(Exception):
    """Base class for all errors raised by a transform."""


# ============================================================================
#                   Configuration errors (abort immediately)
# ============================================================================


class ConfigurationError(WrapTestError):
    """Base class for errors in the wrap configuration itself."""


class MissingWrapperError(ConfigurationError):
    """Raised when neither ``wrapper`` nor ``async_wrapper`` is configured."""

    def __init__(self) -> None:
        super().__init__(
            "At least one of 'wrapper' or 'async_wrapper' must be specified."
        )


class InvalidArgumentError(ConfigurationError):
    """Raised when a wrap argument is unrecognized, duplicated or malformed.

    Attributes:
        key (str): The offending argument name.
        reason (str | None): Optional detail on what is wrong with it.
    """

    def __init__(self, key: str, reason: str | None = None) -> None:
        message = f"Invalid argument '{key}'"
        if reason:
            message += f": {reason}"
        super().__init__(message + ".")
        self.key = key
        self.reason = reason


class ModuleSyntaxError(WrapTestError):
    """Raised when the module source cannot be parsed as Python."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Cannot parse module source: {reason}")
        self.reason = reason


# ============================================================================
#                   Per-test errors (collected, then raised together)
# ============================================================================


class TargetError(WrapTestError):
    """Base class for errors tied to a single test function.

    Attributes:
        test_name (str): Name of the offending test function.
        position (int): Index of the function among the module items, or -1
            when the error was built outside a scan.
    """

    def __init__(self, test_name: str, message: str, *, position: int = -1) -> None:
        super().__init__(message)
        self.test_name = test_name
        self.position = position


class AmbiguousTestMarkerError(TargetError):
    """Raised when a function carries more than one recognized test marker."""

    def __init__(
        self, test_name: str, markers: Sequence[str], *, position: int = -1
    ) -> None:
        listed = ", ".join(f"@{marker}" for marker in markers)
        super().__init__(
            test_name,
            f"Test '{test_name}' has more than one test marker ({listed}); "
            "keep exactly one.",
            position=position,
        )
        self.markers = tuple(markers)


class WrapperMissingError(TargetError):
    """Raised when a synchronous test is found but no ``wrapper`` is configured."""

    def __init__(self, test_name: str, *, position: int = -1) -> None:
        super().__init__(
            test_name,
            f"Test '{test_name}' is synchronous but no 'wrapper' was specified.",
            position=position,
        )


class AsyncWrapperMissingError(TargetError):
    """Raised when an async test is found but no ``async_wrapper`` is configured."""

    def __init__(self, test_name: str, *, position: int = -1) -> None:
        super().__init__(
            test_name,
            f"Test '{test_name}' is async but no 'async_wrapper' was specified.",
            position=position,
        )


class TargetErrorGroup(WrapTestError):
    """Raised once per module with every per-test error found in it.

    Attributes:
        errors (tuple[TargetError, ...]): The collected errors, in source order.
    """

    def __init__(self, errors: Iterable[TargetError]) -> None:
        self.errors = tuple(errors)
        count = len(self.errors)
        lines = [f"{count} test function{'s' if count != 1 else ''} cannot be wrapped:"]
        lines += [f"  - {error}" for error in self.errors]
        super().__init__("\n".join(lines))

    @property
    def test_names(self) -> tuple[str, ...]:
        """Names of the offending tests, in source order."""
        return tuple(error.test_name for error in self.errors)
