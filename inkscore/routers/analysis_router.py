# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the InkScore - Handwriting Personality Insights project.
# Licensed under the MIT License - see the LICENSE file for details.


from typing import List
from fastapi import APIRouter, Depends, HTTPException, Query, Request
from sqlalchemy.orm import Session
from inkscore.models.database import get_db
from inkscore.models.user import User
from inkscore.schemas.analysis_schemas import AnalysisRecordResponse, AnalysisSubmitRequest
from inkscore.services.handwriting_checkin_service import (
    get_checkin,
    get_latest_checkin,
    get_recent_checkins,
    record_analysis,
    serialize_checkin,
)
from inkscore.utils.auth_utils import get_current_user
from inkscore.utils.rate_limit_utils import ANALYSIS_RATE_LIMIT, limiter

router = APIRouter()


@router.post("/analysis", response_model=AnalysisRecordResponse)
@limiter.limit(ANALYSIS_RATE_LIMIT)
async def submit_analysis(
    request: Request,
    payload: AnalysisSubmitRequest,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Stores the result of a vision analysis. Traits are derived from the
    features when the payload has none. Out-of-range values are rejected
    with 422 and the offending field.
    """
    checkin = record_analysis(db, user, payload)
    return serialize_checkin(checkin)


@router.get("/analysis/latest", response_model=AnalysisRecordResponse)
async def latest_analysis(
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    checkin = get_latest_checkin(db, user.id)
    if not checkin:
        raise HTTPException(status_code=404, detail="No analyses yet")
    return serialize_checkin(checkin)


@router.get("/analysis/history", response_model=List[AnalysisRecordResponse])
async def analysis_history(
    limit: int = Query(20, ge=1, le=100, description="Number of analyses, newest first"),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    return [serialize_checkin(c) for c in get_recent_checkins(db, user.id, limit)]


@router.get("/analysis/{analysis_id}", response_model=AnalysisRecordResponse)
async def analysis_detail(
    analysis_id: str,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    checkin = get_checkin(db, user.id, analysis_id)
    if not checkin:
        raise HTTPException(status_code=404, detail="Analysis not found")
    return serialize_checkin(checkin)
