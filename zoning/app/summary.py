"""Read-only zone summary for on-screen display."""

from __future__ import annotations

from dataclasses import dataclass

from zoning.core.zone_system import ZoneSystem


@dataclass(frozen=True, slots=True)
class ZoneSummary:
    """Distinct area and grid square totals."""

    distinct_areas: int
    total_squares: int

    @classmethod
    def from_zone_system(cls, zone_system: ZoneSystem) -> ZoneSummary:
        return cls(
            distinct_areas=zone_system.get_distinct_areas(),
            total_squares=zone_system.get_size_of_all_rects(),
        )

    def lines(self) -> tuple[str, str]:
        return (
            f"Distinct Areas: {self.distinct_areas}",
            f"Total Squares: {self.total_squares}",
        )
