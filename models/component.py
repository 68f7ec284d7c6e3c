from dataclasses import dataclass
from typing import Optional


@dataclass
class ComponentRecord:
    id: str
    name: str
    attended: int = 0
    total: int = 0
    icon: Optional[str] = None

    @property
    def is_active(self) -> bool:
        """A component counts toward the overall average once classes have been held."""
        return self.total > 0
