"""Station domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Station:
    """A railway station known by its EVA number and its HAFAS display name."""

    id: str  # Stable EVA identifier (e.g., "8100008" for St. Pölten Hbf)
    name: str  # Name understood by HAFAS location matching (e.g., "St. Pölten Hbf")
    short_name: str  # Name used in route labels (e.g., "St. Pölten")
