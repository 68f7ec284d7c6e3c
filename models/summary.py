from dataclasses import dataclass, field
from typing import List


@dataclass
class ComponentResult:
    id: str
    name: str
    attended: int
    total: int
    percentage: float   # e.g. 80.0 for 80%, may exceed 100
    band: str           # "Good", "Moderate", "Low"
    is_active: bool

    @property
    def fill_width(self) -> float:
        """Progress bar width in percent, bounded to 0-100."""
        return max(0.0, min(100.0, self.percentage))


@dataclass
class AttendanceSummary:
    overall_percentage: float
    overall_band: str
    active_count: int
    total_attended: int
    total_held: int
    results: List[ComponentResult] = field(default_factory=list)

    @property
    def inactive_count(self) -> int:
        return len(self.results) - self.active_count
