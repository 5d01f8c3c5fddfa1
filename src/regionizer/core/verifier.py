"""Area conservation check.

The retained regions are correct only if their signed areas add up exactly
to the silhouette's area, solids counted positive and holes negative.
"""

from dataclasses import dataclass
from fractions import Fraction

from regionizer.domain import Arrangement, SilhouetteEntry, silhouette_area


@dataclass(frozen=True)
class VerificationResult:
    """Outcome of the area comparison.

    Attributes:
        expected: Signed silhouette area
        actual: Sum of the retained regions' signed areas
    """

    expected: Fraction
    actual: Fraction

    @property
    def passed(self) -> bool:
        return self.expected == self.actual


class AreaVerifier:
    """Compares retained region area with the silhouette area."""

    def verify(
        self,
        arrangement: Arrangement,
        silhouette: tuple[SilhouetteEntry, ...],
    ) -> VerificationResult:
        """Sum both sides of the area invariant.

        Args:
            arrangement: Arrangement narrowed to the retained regions
            silhouette: Normalized silhouette entries

        Returns:
            VerificationResult with both exact sums
        """
        expected = silhouette_area(silhouette)
        actual = sum(
            (region.area(arrangement.vertices) for region in arrangement.regions),
            Fraction(0),
        )
        return VerificationResult(expected=expected, actual=actual)
