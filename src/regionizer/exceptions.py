"""Exception hierarchy for Regionizer."""

from fractions import Fraction


class RegionizerError(Exception):
    """Base exception for all Regionizer errors."""

    pass


class InputError(RegionizerError):
    """Errors related to reading problem input."""

    pass


class ProblemParseError(InputError):
    """Problem text could not be parsed."""

    def __init__(self, position: int, reason: str) -> None:
        self.position = position
        self.reason = reason
        super().__init__(f"Failed to parse problem at token {position}: {reason}")


class ProblemLoadError(InputError):
    """Error loading a problem file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load problem '{path}': {reason}")


class GeometryError(RegionizerError):
    """Errors in geometric construction."""

    pass


class MalformedInputError(GeometryError):
    """Input geometry the arrangement cannot be built from."""

    def __init__(self, subject: str, reason: str) -> None:
        self.subject = subject
        self.reason = reason
        super().__init__(f"Malformed input {subject}: {reason}")


class ArrangementInconsistencyError(GeometryError):
    """Internal invariant of the arrangement graph was violated."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class VerificationError(RegionizerError):
    """Errors raised by the final consistency checks."""

    pass


class AreaMismatchError(VerificationError):
    """Retained regions do not reconstitute the silhouette area."""

    def __init__(self, expected: Fraction, actual: Fraction) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Area mismatch: silhouette area is {expected}, regions sum to {actual}"
        )
