# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the InkScore - Handwriting Personality Insights project.
# Licensed under the MIT License - see the LICENSE file for details.

import logging
from datetime import date, timedelta
from typing import Iterable

from sqlalchemy import func
from sqlalchemy.orm import Session

from inkscore.models.handwriting_checkin import HandwritingCheckin
from inkscore.models.user import User
from inkscore.schemas.analysis_schemas import UserStatsResponse

logger = logging.getLogger(__name__)


def calculate_streak(analysis_dates: Iterable[date]) -> int:
    """
    Number of consecutive calendar days with at least one analysis,
    counted backwards from the most recent analysis day.
    """
    days = sorted(set(analysis_dates), reverse=True)
    if not days:
        return 0

    streak = 1
    for previous, current in zip(days, days[1:]):
        if previous - current != timedelta(days=1):
            break
        streak += 1
    return streak


def update_user_stats(db: Session, user: User) -> User:
    """Refreshes totals, average overall score, streak and baseline. Does not commit."""
    total, avg_score = db.query(
        func.count(HandwritingCheckin.id),
        func.avg(HandwritingCheckin.overall_score)
    ).filter(HandwritingCheckin.user_id == user.id).one()

    timestamps = db.query(HandwritingCheckin.created_at).filter(
        HandwritingCheckin.user_id == user.id
    ).all()
    analysis_dates = [ts.date() for (ts,) in timestamps if ts]

    user.total_analyses = total or 0
    user.average_score = float(avg_score or 0.0)
    user.current_streak = calculate_streak(analysis_dates)
    user.last_analysis_date = max(analysis_dates) if analysis_dates else None

    # 🧭 Baseline = first ever analysis; set once
    if user.baseline_traits is None and total:
        first = (
            db.query(HandwritingCheckin)
            .filter(HandwritingCheckin.user_id == user.id)
            .order_by(HandwritingCheckin.created_at.asc())
            .first()
        )
        user.baseline_traits = dict(first.traits)
        logger.info(f"[UserStats] 🧭 Baseline traits set for user {user.id}")

    db.flush()
    return user


def build_user_stats(user: User) -> UserStatsResponse:
    return UserStatsResponse(
        user_id=user.id,
        total_analyses=user.total_analyses or 0,
        current_streak=user.current_streak or 0,
        average_score=user.average_score or 0.0,
        baseline_traits=user.baseline_traits,
        last_analysis_date=user.last_analysis_date,
    )
