"""Problem reader for the silhouette/skeleton text format.

The format is whitespace separated, with commas between the two
coordinates of a point::

    <polygon count>
    <point count of polygon 1>
    x,y
    ...
    <segment count>
    x1,y1 x2,y2
    ...

Coordinates are integers or fractions such as ``-3/7``.
"""

from fractions import Fraction
from pathlib import Path

from regionizer.domain import Point, Polygon, Problem, Segment
from regionizer.exceptions import ProblemLoadError, ProblemParseError


class _TokenStream:
    """Cursor over the tokens of a problem text."""

    def __init__(self, text: str) -> None:
        self._tokens = text.replace(",", " ").split()
        self._pos = 0

    def _next(self, what: str) -> str:
        if self._pos >= len(self._tokens):
            raise ProblemParseError(self._pos, f"unexpected end of input, expected {what}")
        token = self._tokens[self._pos]
        self._pos += 1
        return token

    def count(self, what: str) -> int:
        token = self._next(what)
        if not (token.isascii() and token.isdigit()):
            raise ProblemParseError(self._pos - 1, f"expected {what}, got {token!r}")
        return int(token)

    def rational(self) -> Fraction:
        token = self._next("a coordinate")
        if not token.isascii():
            raise ProblemParseError(self._pos - 1, f"invalid rational {token!r}")
        try:
            return Fraction(token)
        except (ValueError, ZeroDivisionError) as e:
            raise ProblemParseError(self._pos - 1, f"invalid rational {token!r}") from e

    def point(self) -> Point:
        return Point(self.rational(), self.rational())

    def finish(self) -> None:
        if self._pos != len(self._tokens):
            raise ProblemParseError(
                self._pos, f"{len(self._tokens) - self._pos} unexpected trailing tokens"
            )


def parse_problem(text: str) -> Problem:
    """Parse a problem from text.

    Polygons are returned in their input winding; normalization happens in
    the pipeline.

    Args:
        text: Problem text

    Returns:
        Problem with raw polygons and segments

    Raises:
        ProblemParseError: If the text does not follow the format
    """
    tokens = _TokenStream(text)

    polygons = []
    for _ in range(tokens.count("polygon count")):
        n_points = tokens.count("point count")
        polygons.append(Polygon(tuple(tokens.point() for _ in range(n_points))))

    segments = []
    for _ in range(tokens.count("segment count")):
        segments.append(Segment(tokens.point(), tokens.point()))

    tokens.finish()
    return Problem(polygons=tuple(polygons), segments=tuple(segments))


class ProblemReader:
    """Loads a problem file.

    Example:
        reader = ProblemReader(Path("problem.txt"))
        problem = reader.load()
        print(len(problem.segments))
    """

    def __init__(self, problem_path: Path) -> None:
        """Initialize the problem reader.

        Args:
            problem_path: Path to the problem text file
        """
        self._problem_path = problem_path
        self._problem: Problem | None = None

    def load(self) -> Problem:
        """Read and parse the problem file.

        Returns:
            The parsed problem

        Raises:
            FileNotFoundError: If the file does not exist
            ProblemLoadError: If the file cannot be decoded
            ProblemParseError: If the content does not follow the format
        """
        if not self._problem_path.exists():
            raise FileNotFoundError(f"Problem file not found: {self._problem_path}")

        try:
            text = self._problem_path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise ProblemLoadError(str(self._problem_path), str(e)) from e

        self._problem = parse_problem(text)
        return self._problem

    @property
    def problem(self) -> Problem:
        """Return the loaded problem.

        Raises:
            RuntimeError: If the problem has not been loaded yet
        """
        if self._problem is None:
            raise RuntimeError("Problem not loaded. Call load() first.")
        return self._problem
