"""
Run-length segmentation of a binarized scanline into EAN-13 structure.

An EAN-13 symbol read left to right is:

    left guard    3 runs   bar, space, bar
    left code    24 runs   6 digits x (space, bar, space, bar)
    middle guard  5 runs   space, bar, space, bar, space
    right code   24 runs   6 digits x (bar, space, bar, space)
    right guard   3 runs   bar, space, bar
"""

from collections.abc import Sequence
from dataclasses import dataclass

LEFT_GUARD_SIZE = 3
LEFT_CODE_SIZE = 24
MIDDLE_GUARD_SIZE = 5
RIGHT_CODE_SIZE = 24
RIGHT_GUARD_SIZE = 3

RUNS_PER_DIGIT = 4
DIGITS_PER_HALF = LEFT_CODE_SIZE // RUNS_PER_DIGIT


@dataclass(frozen=True)
class RowStructure:
    """Run lengths of the five parts of one scanline."""

    left_guard: tuple[int, ...]
    left_code: tuple[int, ...]
    middle_guard: tuple[int, ...]
    right_code: tuple[int, ...]
    right_guard: tuple[int, ...]

    @property
    def guards(self) -> tuple[tuple[int, ...], ...]:
        return (self.left_guard, self.middle_guard, self.right_guard)

    def left_digits(self) -> list[tuple[int, ...]]:
        """Split the left code into per-digit run quartets."""
        return _split_digits(self.left_code)

    def right_digits(self) -> list[tuple[int, ...]]:
        """Split the right code into per-digit run quartets."""
        return _split_digits(self.right_code)


def _split_digits(runs: tuple[int, ...]) -> list[tuple[int, ...]]:
    return [runs[i : i + RUNS_PER_DIGIT] for i in range(0, len(runs), RUNS_PER_DIGIT)]


def find_run_start(row: Sequence[int], start: int, color: int) -> int:
    """
    Find the first pixel of the given color at or after ``start``.

    Returns:
        Its index, or len(row) if the color never appears
    """
    for index in range(start, len(row)):
        if row[index] == color:
            return index
    return len(row)


def collect_runs(
    row: Sequence[int],
    start: int,
    first_color: int,
    size: int,
    black: int,
    white: int,
) -> tuple[int, list[int] | None]:
    """
    Collect ``size`` alternating runs starting at ``start``.

    Every pixel of the opposite color closes the current run and opens the
    next one. The pixel that would open run number ``size`` ends the group and
    is left for the next part, so a group only counts as filled when its last
    run is followed by a pixel of the other color.

    Args:
        row: Binarized scanline
        start: Index to start scanning from
        first_color: Expected color of the first run
        size: Number of runs in the group
        black: Pixel value of a bar
        white: Pixel value of a space

    Returns:
        Tuple of (index where the next part starts, run lengths). On failure
        the index is len(row) and the runs are None.
    """
    runs = [0] * size
    current = first_color
    other = white if first_color == black else black
    slot = 0

    for index in range(start, len(row)):
        if row[index] == other:
            current, other = other, current
            slot += 1
            if slot == size:
                return index, runs
        runs[slot] += 1

    return len(row), None


def segment_row(row: Sequence[int], black: int, white: int) -> RowStructure | None:
    """
    Segment a scanline into guard and code run groups.

    Returns:
        The row structure, or None if any part could not be filled
    """
    index = find_run_start(row, 0, black)

    parts: list[tuple[int, ...]] = []
    for first_color, size in (
        (black, LEFT_GUARD_SIZE),
        (white, LEFT_CODE_SIZE),
        (white, MIDDLE_GUARD_SIZE),
        (black, RIGHT_CODE_SIZE),
        (black, RIGHT_GUARD_SIZE),
    ):
        index, runs = collect_runs(row, index, first_color, size, black, white)
        if runs is None:
            return None
        parts.append(tuple(runs))

    return RowStructure(*parts)
