"""
Workout record model.

The typed, already-normalized shape every statistic is computed from.
Raw dicts coming from the mobile backend are turned into this form once,
by the adapter in fortis.services.analytics.adapter.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional

# Defaults applied when a metric is absent from the source data
DEFAULT_TOTAL_VOLUME = 0.0
DEFAULT_AVERAGE_INTENSITY = 3.0  # neutral point of the 1-5 scale
DEFAULT_COMPLETION_PERCENTAGE = 0.0


@dataclass(frozen=True)
class WorkoutRecord:
    """Single logged workout session."""
    date: datetime
    total_volume: float = DEFAULT_TOTAL_VOLUME
    average_intensity: float = DEFAULT_AVERAGE_INTENSITY  # 1-5
    completion_percentage: float = DEFAULT_COMPLETION_PERCENTAGE  # 0-100

    # Display metadata, never used by the calculations
    id: Optional[str] = None
    name: Optional[str] = None

    # Raw data backup for debugging
    raw_data: Dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    def to_dict(self) -> dict:
        """Convert to dictionary for the mobile client."""
        return {
            "id": self.id,
            "name": self.name,
            "date": self.date.isoformat(),
            "totalVolume": self.total_volume,
            "averageIntensity": self.average_intensity,
            "completionPercentage": self.completion_percentage,
        }
