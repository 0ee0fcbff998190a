"""
Module-width estimation and digit quantization.

Run lengths are measured in pixels. Dividing them by the module width
estimated from the guard patterns gives fractional module counts, which are
settled to integers one bar/space pair at a time.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

MAX_MODULES = 4


@dataclass(frozen=True)
class ModuleWidth:
    """Average module width measured over the guard runs."""

    total: int
    count: int

    @classmethod
    def from_guards(cls, *groups: Iterable[int]) -> "ModuleWidth":
        """Build from the left, middle and right guard run groups."""
        total = 0
        count = 0
        for group in groups:
            for length in group:
                total += length
                count += 1
        if count == 0 or total <= 0:
            raise ValueError("Guard runs are empty")
        return cls(total=total, count=count)

    @property
    def h(self) -> float:
        """Pixels per module."""
        return self.total / self.count

    def ratio(self, length: int) -> float:
        """Convert a run length in pixels to modules."""
        return length * self.count / self.total


def _carries(a: float, b: float) -> bool:
    """True when truncating a and b separately loses a module against their sum."""
    return int(a + b) > int(a) + int(b)


def _settle_pair(
    first: float,
    second: float,
    neighbor: float | None = None,
) -> tuple[float, float]:
    """
    Settle one bar/space pair of ratios.

    ``neighbor`` is the ratio right after the pair. It only breaks a tie in the
    fractional parts; without it a tie rounds up ``second``.
    """
    if first < 1.0 or second < 1.0:
        total = first + second
        if first < 1.0:
            return 1.0, float(int(total - 1))
        return float(int(total - 1)), 1.0

    if not _carries(first, second):
        return first, second

    first_rem = first - int(first)
    second_rem = second - int(second)
    if first_rem > second_rem:
        return float(int(first) + 1), float(int(second))
    if first_rem < second_rem or neighbor is None:
        return float(int(first)), float(int(second) + 1)
    if _carries(second, neighbor):
        return float(int(first) + 1), float(int(second))
    return float(int(first)), float(int(second) + 1)


def quantize_ratios(r0: float, r1: float, r2: float, r3: float) -> int:
    """
    Turn four module ratios into a pattern code.

    Returns:
        Code c0*1000 + c1*100 + c2*10 + c3 with every component at most 4
    """
    q0, q1 = _settle_pair(r0, r1, neighbor=r2)
    q2, q3 = _settle_pair(r2, r3)

    components = [min(MAX_MODULES, int(q)) for q in (q0, q1, q2, q3)]
    return components[0] * 1000 + components[1] * 100 + components[2] * 10 + components[3]


def quantize_digit(runs: Sequence[int], width: ModuleWidth) -> int:
    """Quantize the four run lengths of one digit into a pattern code."""
    if len(runs) != 4:
        raise ValueError(f"A digit has 4 runs, got {len(runs)}")
    r0, r1, r2, r3 = (width.ratio(length) for length in runs)
    return quantize_ratios(r0, r1, r2, r3)
