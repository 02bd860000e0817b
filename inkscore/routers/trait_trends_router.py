# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the InkScore - Handwriting Personality Insights project.
# Licensed under the MIT License - see the LICENSE file for details.


from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from inkscore.models.database import get_db
from inkscore.models.user import User
from inkscore.schemas.analysis_schemas import AnalysisDataResponse, TraitTrendsResponse, UserStatsResponse
from inkscore.services.trait_insight_service import get_analysis_data, get_trait_trends
from inkscore.services.user_stats_service import build_user_stats
from inkscore.utils.auth_utils import get_current_user

router = APIRouter()


@router.get("/trait-trends", response_model=TraitTrendsResponse)
async def trait_trends(
    source: str = Query("auto", pattern="^(auto|snapshots|checkins)$"),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Per-trait trend lines. An empty list is a normal answer for users
    without history.
    """
    return get_trait_trends(db, user.id, source=source)


@router.get("/analysis-data", response_model=AnalysisDataResponse)
async def analysis_data(
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    return get_analysis_data(db, user.id)


@router.get("/profile/stats", response_model=UserStatsResponse)
async def profile_stats(user: User = Depends(get_current_user)):
    return build_user_stats(user)
