# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the InkScore - Handwriting Personality Insights project.
# Licensed under the MIT License - see the LICENSE file for details.

import os
import logging
from datetime import datetime, timedelta
from typing import Optional

from sqlalchemy.orm import Session

from inkscore.schemas.analysis_schemas import AnalysisDataResponse, SnapshotResponse, TraitTrendsResponse
from inkscore.services.handwriting_checkin_service import (
    get_latest_checkin,
    get_recent_checkins,
    serialize_checkin,
)
from inkscore.services.personality_snapshot_service import get_snapshots_since
from inkscore.services.trait_trend_engine import (
    CheckinHistory,
    SnapshotHistory,
    calculate_trait_trends,
    select_trend_source,
)

logger = logging.getLogger(__name__)

# ✅ Trend windows
SNAPSHOT_WINDOW_DAYS = int(os.getenv("SNAPSHOT_WINDOW_DAYS", "30"))
RECENT_CHECKIN_LIMIT = int(os.getenv("RECENT_CHECKIN_LIMIT", "10"))

TREND_SOURCES = ("auto", "snapshots", "checkins")


def _window_start(now: Optional[datetime]):
    now = now or datetime.utcnow()
    return (now - timedelta(days=SNAPSHOT_WINDOW_DAYS)).date()


def get_trait_trends(
    db: Session,
    user_id: str,
    source: str = "auto",
    now: Optional[datetime] = None
) -> TraitTrendsResponse:
    """
    source="auto" prefers the daily snapshots in the window and falls back to
    the most recent raw checkins; "snapshots"/"checkins" force one of them.
    """
    if source not in TREND_SOURCES:
        raise ValueError(f"Unknown trend source: {source}")

    snapshots = []
    checkins = []
    if source in ("auto", "snapshots"):
        snapshots = get_snapshots_since(db, user_id, _window_start(now))
    if source == "checkins" or (source == "auto" and not snapshots):
        checkins = get_recent_checkins(db, user_id, RECENT_CHECKIN_LIMIT)

    history = select_trend_source(snapshots, checkins)
    if history is None:
        logger.info(f"[Trends] ℹ️ No trend data yet for user {user_id}")
        return TraitTrendsResponse()

    trends = calculate_trait_trends(history)
    logger.info(f"[Trends] 📈 {len(trends)} trends for user {user_id} from {history.kind}")
    return TraitTrendsResponse(source=history.kind, trends=trends)


def get_analysis_data(db: Session, user_id: str, now: Optional[datetime] = None) -> AnalysisDataResponse:
    """
    Everything the analysis dashboard needs in one call: latest analysis,
    snapshots in the window, recent checkins and the trait trends.
    """
    latest = get_latest_checkin(db, user_id)
    snapshots = get_snapshots_since(db, user_id, _window_start(now))
    recent = get_recent_checkins(db, user_id, RECENT_CHECKIN_LIMIT)

    history = select_trend_source(snapshots, recent)
    if isinstance(history, SnapshotHistory):
        logger.info(f"[AnalysisData] Using {len(snapshots)} snapshots for trends")
    elif isinstance(history, CheckinHistory):
        logger.info(f"[AnalysisData] Using {len(recent)} checkins for trends")

    return AnalysisDataResponse(
        latest_analysis=serialize_checkin(latest) if latest else None,
        snapshots=[
            SnapshotResponse(
                snapshot_date=s.snapshot_date,
                avg_traits=s.avg_traits,
                analysis_count=s.analysis_count,
            )
            for s in snapshots
        ],
        recent_checkins=[serialize_checkin(c) for c in recent],
        trait_trends=calculate_trait_trends(history),
        trends_source=history.kind if history else None,
        has_data=latest is not None,
    )
