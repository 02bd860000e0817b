# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the InkScore - Handwriting Personality Insights project.
# Licensed under the MIT License - see the LICENSE file for details.

import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from inkscore.models.handwriting_checkin import HandwritingCheckin
from inkscore.models.user import User
from inkscore.schemas.analysis_schemas import AnalysisRecordResponse, AnalysisSubmitRequest
from inkscore.services.personality_snapshot_service import update_personality_snapshot
from inkscore.services.trait_derivation_engine import calculate_overall_score, resolve_traits
from inkscore.services.user_stats_service import update_user_stats
from inkscore.utils.trait_constants import TRAIT_FORMULA_VERSION, TRAITS_SOURCE_DERIVED
from inkscore.utils.trait_display_utils import convert_traits_to_display, format_trait_summary
from inkscore.utils.trait_validation import validate_confidence, validate_features

logger = logging.getLogger(__name__)


def record_analysis(
    db: Session,
    user: User,
    payload: AnalysisSubmitRequest,
    created_at: Optional[datetime] = None
) -> HandwritingCheckin:
    """
    Stores one vision analysis for the user:
    1. Validate features / traits / confidence (ValidationError, nothing stored)
    2. Derive traits when the vision service sent none
    3. Overall score = mean of the eight traits
    4. Insert the checkin, then refresh the day's snapshot and the user stats
    """
    features = validate_features(payload.features)
    traits, source = resolve_traits(features, payload.traits)
    confidence = validate_confidence(payload.confidence_score)
    overall = calculate_overall_score(traits)

    checkin = HandwritingCheckin(
        user_id=user.id,
        created_at=created_at or datetime.utcnow(),
        features=features,
        traits=traits,
        traits_source=source,
        formula_version=TRAIT_FORMULA_VERSION if source == TRAITS_SOURCE_DERIVED else None,
        overall_score=overall,
        confidence_score=confidence,
        ai_analysis=payload.analysis,
        gpt_summary=payload.formatted_analysis or format_trait_summary(traits),
        processing_time_ms=payload.processing_time_ms,
    )

    try:
        db.add(checkin)
        db.flush()
        update_personality_snapshot(db, user.id, checkin.created_at.date())
        update_user_stats(db, user)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"[Checkin] ❌ Failed to store analysis for user {user.id}: {e}")
        raise

    db.refresh(checkin)
    logger.info(
        f"[Checkin] ✅ Stored analysis {checkin.id} for user {user.id} "
        f"(traits={source}, overall={overall:.3f})"
    )
    return checkin


def get_latest_checkin(db: Session, user_id: str) -> Optional[HandwritingCheckin]:
    return (
        db.query(HandwritingCheckin)
        .filter(HandwritingCheckin.user_id == user_id)
        .order_by(HandwritingCheckin.created_at.desc())
        .first()
    )


def get_recent_checkins(db: Session, user_id: str, limit: int) -> List[HandwritingCheckin]:
    """Newest first, like the history screen shows them."""
    return (
        db.query(HandwritingCheckin)
        .filter(HandwritingCheckin.user_id == user_id)
        .order_by(HandwritingCheckin.created_at.desc())
        .limit(limit)
        .all()
    )


def get_checkin(db: Session, user_id: str, analysis_id: str) -> Optional[HandwritingCheckin]:
    return db.query(HandwritingCheckin).filter(
        HandwritingCheckin.id == analysis_id,
        HandwritingCheckin.user_id == user_id
    ).first()


def serialize_checkin(checkin: HandwritingCheckin) -> AnalysisRecordResponse:
    return AnalysisRecordResponse(
        analysis_id=checkin.id,
        created_at=checkin.created_at,
        features=checkin.features,
        traits=checkin.traits,
        traits_source=checkin.traits_source,
        overall_score=checkin.overall_score,
        confidence_score=checkin.confidence_score,
        formatted_analysis=checkin.gpt_summary,
        analysis=checkin.ai_analysis,
        display_traits=convert_traits_to_display(checkin.traits),
    )
