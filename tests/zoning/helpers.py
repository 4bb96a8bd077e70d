from __future__ import annotations

from collections.abc import Sequence

from zoning.core.geometry import Rect, normalized_size, overlap_region


def assert_disjoint(rects: Sequence[Rect], tolerance: float = 1.0, precision: int | None = None) -> None:
    for index, a in enumerate(rects):
        for b in rects[index + 1 :]:
            overlap = overlap_region(a, b)
            if precision is not None:
                overlap = overlap.quantized(precision)
            assert normalized_size(overlap, tolerance) == 0, (a, b)
