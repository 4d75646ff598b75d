"""DTOs for service areas and postcode coverage."""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class ServiceArea:
    """A serviced area keyed by its primary postcode."""

    id: int
    name: str
    postcode: str
    state: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class PostcodeRange:
    """Inclusive postcode range covered by a named region."""

    area: str
    start: str
    end: str

    def contains(self, postcode: str) -> bool:
        """True when postcode (4 digits) falls in [start, end]."""
        return int(self.start) <= int(postcode) <= int(self.end)

    def display(self) -> str:
        """'4000-4199', or a single postcode when start == end."""
        return self.start if self.start == self.end else f"{self.start}-{self.end}"


@dataclass(frozen=True)
class PostcodeCoverage:
    """Result of a postcode coverage check."""

    postcode: str
    is_serviced: bool
    areas: list[str]
