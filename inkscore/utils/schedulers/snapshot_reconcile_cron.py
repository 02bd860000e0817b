# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the InkScore - Handwriting Personality Insights project.
# Licensed under the MIT License - see the LICENSE file for details.


from datetime import datetime, timedelta
from typing import Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
import logging

from inkscore.models.database import SessionLocal
from inkscore.models.handwriting_checkin import HandwritingCheckin
from inkscore.services.personality_snapshot_service import update_personality_snapshot

logger = logging.getLogger(__name__)


def rebuild_previous_day_snapshots(now: Optional[datetime] = None, db: Optional[Session] = None) -> int:
    """
    Recomputes yesterday's snapshot for every user who analysed yesterday,
    correcting any inline snapshot update that failed. Returns the number
    of snapshots rebuilt.
    """
    owns_session = db is None
    db = db or SessionLocal()
    try:
        now = now or datetime.utcnow()
        day = (now - timedelta(days=1)).date()
        start = datetime.combine(day, datetime.min.time())
        end = start + timedelta(days=1)

        user_ids = [
            user_id for (user_id,) in db.query(HandwritingCheckin.user_id).filter(
                HandwritingCheckin.created_at >= start,
                HandwritingCheckin.created_at < end
            ).distinct().all()
        ]

        rebuilt = 0
        for user_id in user_ids:
            if update_personality_snapshot(db, user_id, day) is not None:
                rebuilt += 1

        db.commit()
        logger.info(f"[SnapshotReconcile] ✅ Rebuilt {rebuilt} snapshots for {day}.")
        return rebuilt
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"[SnapshotReconcile] ❌ Error: {e}")
        raise
    finally:
        if owns_session:
            db.close()
