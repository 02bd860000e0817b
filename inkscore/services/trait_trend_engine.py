# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the InkScore - Handwriting Personality Insights project.
# Licensed under the MIT License - see the LICENSE file for details.

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Dict, List, Optional, Sequence, Union

from inkscore.schemas.analysis_schemas import ChartDataPoint, TraitTrend
from inkscore.utils.trait_constants import (
    TRAIT_CODES,
    TRAIT_COLORS,
    TRAIT_NAMES,
    TREND_STABLE_THRESHOLD_PCT,
)
from inkscore.utils.trait_validation import ValidationError, validate_traits


@dataclass(frozen=True)
class TrendObservation:
    observed_at: Union[date, datetime]
    traits: Dict[str, float]


def _read(item: Any, key: str) -> Any:
    # ORM rows expose attributes, decoded JSON rows expose keys
    if isinstance(item, dict):
        return item.get(key)
    return getattr(item, key, None)


def _as_moment(field: str, value: Any) -> Union[date, datetime]:
    if isinstance(value, (datetime, date)):
        return value
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            pass
    raise ValidationError(field, value, "must be a date or ISO-8601 timestamp")


def _sort_key(moment: Union[date, datetime]) -> tuple:
    if isinstance(moment, datetime):
        if moment.tzinfo is not None:
            moment = moment.replace(tzinfo=None) - moment.utcoffset()
        return (moment.date(), moment.time())
    return (moment, datetime.min.time())


@dataclass(frozen=True)
class SnapshotHistory:
    """Daily personality snapshots, already in snapshot_date ascending order."""
    snapshots: Sequence[Any]
    kind: str = "snapshots"

    def observations(self) -> List[TrendObservation]:
        return [
            TrendObservation(
                observed_at=_as_moment("snapshot_date", _read(s, "snapshot_date")),
                traits=validate_traits(_read(s, "avg_traits")),
            )
            for s in self.snapshots
        ]


@dataclass(frozen=True)
class CheckinHistory:
    """Raw per-analysis records, in any order; sorted by created_at here."""
    checkins: Sequence[Any]
    kind: str = "checkins"

    def observations(self) -> List[TrendObservation]:
        observations = [
            TrendObservation(
                observed_at=_as_moment("created_at", _read(c, "created_at")),
                traits=validate_traits(_read(c, "traits")),
            )
            for c in self.checkins
        ]
        return sorted(observations, key=lambda o: _sort_key(o.observed_at))


TrendSource = Union[SnapshotHistory, CheckinHistory]


def select_trend_source(
    snapshots: Optional[Sequence[Any]],
    checkins: Optional[Sequence[Any]],
) -> Optional[TrendSource]:
    """
    Snapshots win whenever any exist in the window; raw checkins are only a
    fallback. The two are never merged into one series.
    """
    if snapshots:
        return SnapshotHistory(list(snapshots))
    if checkins:
        return CheckinHistory(list(checkins))
    return None


def calculate_change_percentage(first: float, last: float) -> float:
    """
    Relative change first -> last, in percent.

    A zero baseline reports 0.0 rather than an infinite increase. This keeps
    the behaviour of the shipped mobile app and is pending product review.
    """
    if first == 0:
        return 0.0
    return (last - first) / first * 100


def classify_trend(change_percentage: float) -> str:
    if abs(change_percentage) < TREND_STABLE_THRESHOLD_PCT:
        return "stable"
    return "up" if change_percentage > 0 else "down"


def _build_trend(code: str, observations: List[TrendObservation]) -> TraitTrend:
    data_points = [
        ChartDataPoint(date=o.observed_at, value=o.traits[code])
        for o in observations
    ]

    current_value = data_points[-1].value
    change_percentage = 0.0
    if len(data_points) >= 2:
        change_percentage = calculate_change_percentage(data_points[0].value, data_points[-1].value)

    return TraitTrend(
        trait_code=code,
        trait_name=TRAIT_NAMES[code],
        current_value=current_value,
        data_points=data_points,
        change_percentage=change_percentage,
        trend_direction=classify_trend(change_percentage),
        color=TRAIT_COLORS[code],
    )


def calculate_trait_trends(
    source: Optional[TrendSource],
    max_points: Optional[int] = None,
) -> List[TraitTrend]:
    """
    Builds one TraitTrend per trait from a snapshot or checkin history.

    - max_points keeps only the most recent N observations.
    - An empty (or missing) history returns [] rather than raising.
    """
    if source is None:
        return []

    observations = source.observations()
    if max_points is not None:
        if max_points < 1:
            raise ValidationError("max_points", max_points, "must be at least 1")
        observations = observations[-max_points:]

    if not observations:
        return []

    return [_build_trend(code, observations) for code in TRAIT_CODES]
