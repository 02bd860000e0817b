# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the InkScore - Handwriting Personality Insights project.
# Licensed under the MIT License - see the LICENSE file for details.

import logging
from datetime import date, datetime, time, timedelta
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from inkscore.models.handwriting_checkin import HandwritingCheckin
from inkscore.models.personality_snapshot import PersonalitySnapshot
from inkscore.services.trait_derivation_engine import average_traits

logger = logging.getLogger(__name__)


def _day_bounds(day: date):
    start = datetime.combine(day, time.min)
    return start, start + timedelta(days=1)


def _find_snapshot(db: Session, user_id: str, snapshot_date: date) -> Optional[PersonalitySnapshot]:
    return db.query(PersonalitySnapshot).filter(
        PersonalitySnapshot.user_id == user_id,
        PersonalitySnapshot.snapshot_date == snapshot_date
    ).first()


def update_personality_snapshot(db: Session, user_id: str, snapshot_date: date) -> Optional[PersonalitySnapshot]:
    """
    Recomputes the user's snapshot for one calendar day from that day's checkins.
    The existing row is superseded in place, so re-analysing on the same day
    never appends a second snapshot. Does not commit.
    """
    start, end = _day_bounds(snapshot_date)
    checkins = db.query(HandwritingCheckin).filter(
        HandwritingCheckin.user_id == user_id,
        HandwritingCheckin.created_at >= start,
        HandwritingCheckin.created_at < end
    ).all()

    snapshot = _find_snapshot(db, user_id, snapshot_date)

    if not checkins:
        if snapshot:
            db.delete(snapshot)
            logger.info(f"[Snapshot] 🗑️ Removed empty snapshot {snapshot_date} for user {user_id}")
        return None

    avg = average_traits(c.traits for c in checkins)

    if snapshot is None:
        try:
            with db.begin_nested():
                db.add(PersonalitySnapshot(
                    user_id=user_id, snapshot_date=snapshot_date,
                    avg_traits=avg, analysis_count=len(checkins)
                ))
        except IntegrityError:
            # Same-day submission inserted the row first; update theirs instead
            logger.info(f"[Snapshot] ℹ️ {snapshot_date} for user {user_id} created concurrently, updating")

    snapshot = snapshot or _find_snapshot(db, user_id, snapshot_date)
    snapshot.avg_traits = avg
    snapshot.analysis_count = len(checkins)
    db.flush()

    logger.info(f"[Snapshot] ✅ {snapshot_date} for user {user_id} from {len(checkins)} analyses")
    return snapshot


def get_snapshots_since(db: Session, user_id: str, since: date) -> List[PersonalitySnapshot]:
    return (
        db.query(PersonalitySnapshot)
        .filter(
            PersonalitySnapshot.user_id == user_id,
            PersonalitySnapshot.snapshot_date >= since
        )
        .order_by(PersonalitySnapshot.snapshot_date.asc())
        .all()
    )
