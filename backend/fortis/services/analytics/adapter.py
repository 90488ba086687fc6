"""
Workout Adapter - Normalize raw workout data into typed records.

Raw workouts reach the dashboard as loosely shaped dicts: the mobile
backend stores snake_case columns while older client builds wrote
camelCase keys, and any metric may be missing. All of that is resolved
here, once, so the calculations only ever see WorkoutRecord values.
"""
import math
from datetime import date, datetime, timezone
from numbers import Real
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from fortis.core.exceptions import InvalidInputError
from fortis.core.logging import get_logger
from fortis.models.workout import (
    DEFAULT_AVERAGE_INTENSITY,
    DEFAULT_COMPLETION_PERCENTAGE,
    DEFAULT_TOTAL_VOLUME,
    WorkoutRecord,
)

logger = get_logger(__name__)

RawWorkout = Union[WorkoutRecord, Dict[str, Any]]

# Canonical key first, then fallbacks; first present key wins
FIELD_ALIASES: Dict[str, Tuple[str, ...]] = {
    "date": ("date", "created_at", "createdAt"),
    "total_volume": ("total_volume", "totalVolume"),
    "average_intensity": ("average_intensity", "averageIntensity"),
    "completion_percentage": ("completion_percentage", "completionPercentage"),
    "id": ("id",),
    "name": ("name", "title"),
}

METRIC_DEFAULTS: Dict[str, float] = {
    "total_volume": DEFAULT_TOTAL_VOLUME,
    "average_intensity": DEFAULT_AVERAGE_INTENSITY,
    "completion_percentage": DEFAULT_COMPLETION_PERCENTAGE,
}


class WorkoutAdapter:
    """
    Adapter for workout dicts produced by the mobile backend.

    Handles:
    - Alternate key spellings (see FIELD_ALIASES)
    - Missing metrics (see METRIC_DEFAULTS)
    - Dates as datetime/date objects, ISO-8601 strings or epoch milliseconds
    """

    def normalize(self, raw: RawWorkout, index: Optional[int] = None) -> WorkoutRecord:
        """
        Normalize a single raw workout.

        Args:
            raw: Raw workout dict, or an already typed WorkoutRecord
            index: Position in the source collection, used in error messages

        Returns:
            WorkoutRecord with defaults applied

        Raises:
            InvalidInputError: If the date is missing or unparseable, a
                metric is not a finite number, or volume is negative
        """
        if isinstance(raw, WorkoutRecord):
            return raw

        if not isinstance(raw, dict):
            raise InvalidInputError(
                f"Workout must be a dict or WorkoutRecord, got {type(raw).__name__}",
                value=raw,
                index=index,
            )

        raw_date = self._lookup(raw, "date")
        record = WorkoutRecord(
            date=parse_date(raw_date, index=index),
            total_volume=self._metric(raw, "total_volume", index),
            average_intensity=self._metric(raw, "average_intensity", index),
            completion_percentage=self._metric(raw, "completion_percentage", index),
            id=self._optional_str(self._lookup(raw, "id")),
            name=self._optional_str(self._lookup(raw, "name")),
            raw_data=raw,
        )

        logger.debug(
            "Normalized workout",
            index=index,
            date=record.date.isoformat(),
            volume=record.total_volume,
        )

        return record

    def normalize_many(self, raws: Iterable[RawWorkout]) -> List[WorkoutRecord]:
        """Normalize a whole collection, preserving input order."""
        return [self.normalize(raw, index=idx) for idx, raw in enumerate(raws)]

    def _lookup(self, raw: Dict[str, Any], field_name: str) -> Any:
        """Return the first non-null value among the field's aliases."""
        for key in FIELD_ALIASES[field_name]:
            value = raw.get(key)
            if value is not None:
                return value
        return None

    def _metric(self, raw: Dict[str, Any], field_name: str, index: Optional[int]) -> float:
        """Look up a numeric metric, falling back to its default when absent."""
        value = self._lookup(raw, field_name)
        if value is None:
            return METRIC_DEFAULTS[field_name]

        if isinstance(value, bool):
            raise InvalidInputError(
                f"{field_name} must be a number, got bool",
                field=field_name,
                value=value,
                index=index,
            )
        if isinstance(value, Real):
            return check_metric(field_name, float(value), index=index)

        try:
            number = float(value)
        except (TypeError, ValueError):
            logger.warning(
                "Rejected non-numeric workout metric",
                field=field_name,
                index=index,
            )
            raise InvalidInputError(
                f"{field_name} must be a number, got {value!r}",
                field=field_name,
                value=value,
                index=index,
            ) from None
        return check_metric(field_name, number, index=index)

    def _optional_str(self, value: Any) -> Optional[str]:
        return None if value is None else str(value)


def check_metric(field_name: str, value: Any, index: Optional[int] = None) -> float:
    """
    Validate a metric that is about to enter the calculations.

    Metrics must be finite real numbers, and volume cannot be negative.

    Raises:
        InvalidInputError: If the value breaks either rule
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidInputError(
            f"{field_name} must be a number, got {type(value).__name__}",
            field=field_name,
            value=value,
            index=index,
        )

    number = float(value)
    if not math.isfinite(number):
        logger.warning("Rejected non-finite workout metric", field=field_name, index=index)
        raise InvalidInputError(
            f"{field_name} must be finite, got {value!r}",
            field=field_name,
            value=value,
            index=index,
        )
    if field_name == "total_volume" and number < 0:
        logger.warning("Rejected negative workout volume", index=index)
        raise InvalidInputError(
            f"{field_name} must not be negative, got {value!r}",
            field=field_name,
            value=value,
            index=index,
        )
    return number


def parse_date(value: Any, index: Optional[int] = None) -> datetime:
    """
    Parse a workout date.

    Accepts datetime, date (taken as midnight), ISO-8601 strings (a
    trailing "Z" is read as UTC) and epoch milliseconds.

    Raises:
        InvalidInputError: If the value is missing or cannot be parsed
    """
    if value is None:
        logger.warning("Rejected workout without date", index=index)
        raise InvalidInputError("Workout is missing a date", field="date", index=index)

    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)

    if isinstance(value, bool):
        raise InvalidInputError(
            "Workout date must not be a bool", field="date", value=value, index=index
        )

    if isinstance(value, Real):
        # Epoch milliseconds, as sent by the mobile client
        try:
            return datetime.fromtimestamp(float(value) / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            logger.warning("Rejected out-of-range workout timestamp", index=index)
            raise InvalidInputError(
                f"Workout timestamp out of range: {value!r}",
                field="date",
                value=value,
                index=index,
            ) from None

    if isinstance(value, str):
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            return datetime.fromisoformat(text)
        except ValueError:
            logger.warning("Rejected unparseable workout date", index=index)
            raise InvalidInputError(
                f"Unparseable workout date: {value!r}",
                field="date",
                value=value,
                index=index,
            ) from None

    raise InvalidInputError(
        f"Unsupported workout date type: {type(value).__name__}",
        field="date",
        value=value,
        index=index,
    )


_adapter = WorkoutAdapter()


def get_adapter() -> WorkoutAdapter:
    """Get the shared workout adapter."""
    return _adapter
