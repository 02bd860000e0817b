# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the InkScore - Handwriting Personality Insights project.
# Licensed under the MIT License - see the LICENSE file for details.


import datetime as dt
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field


class HandwritingFeatures(BaseModel):
    SLN: float = Field(..., description="Slant angle (0-1)")
    WSP: float = Field(..., description="Word spacing (0-1)")
    LSZ: float = Field(..., description="Letter size (0-1)")
    BLN: float = Field(..., description="Baseline stability (0-1)")
    MLM: float = Field(..., description="Left margin (0-1)")
    PRT: float = Field(..., description="Pressure (0-1)")
    LSP: float = Field(..., description="Letter spacing (0-1)")
    LCR: float = Field(..., description="Curvature (0-1)")
    CNT: float = Field(..., description="Connectedness (0-1)")
    RHM: float = Field(..., description="Rhythm / speed (0-1)")


class PersonalityTraits(BaseModel):
    CNF: float = Field(..., description="Confidence")
    EMX: float = Field(..., description="Emotional expressiveness")
    CRT: float = Field(..., description="Creativity")
    DSC: float = Field(..., description="Discipline")
    SOC: float = Field(..., description="Social openness")
    NRG: float = Field(..., description="Mental energy")
    INT: float = Field(..., description="Intuition")
    IND: float = Field(..., description="Independence")


class AnalysisSubmitRequest(BaseModel):
    """
    Payload produced by the external vision analysis.
    Ranges are checked by the trait validators (not here) so errors
    name the exact field and value.
    """
    features: Dict[str, Any]
    traits: Optional[Dict[str, Any]] = None
    confidence_score: Any
    analysis: Optional[Dict[str, Any]] = None
    formatted_analysis: Optional[str] = None
    processing_time_ms: Optional[int] = None


class TraitDisplay(BaseModel):
    code: str
    name: str
    score: int  # 0-100
    color: str
    icon: str


class AnalysisRecordResponse(BaseModel):
    analysis_id: str
    created_at: dt.datetime
    features: HandwritingFeatures
    traits: PersonalityTraits
    traits_source: str
    overall_score: float
    confidence_score: float
    formatted_analysis: Optional[str] = None
    analysis: Optional[Dict[str, Any]] = None
    display_traits: List[TraitDisplay] = []


class SnapshotResponse(BaseModel):
    snapshot_date: dt.date
    avg_traits: PersonalityTraits
    analysis_count: int


class ChartDataPoint(BaseModel):
    date: Union[dt.datetime, dt.date]
    value: float


class TraitTrend(BaseModel):
    trait_code: str
    trait_name: str
    current_value: float
    data_points: List[ChartDataPoint]
    change_percentage: float
    trend_direction: Literal["up", "down", "stable"]
    color: str


class TraitTrendsResponse(BaseModel):
    source: Optional[Literal["snapshots", "checkins"]] = None
    trends: List[TraitTrend] = []


class AnalysisDataResponse(BaseModel):
    latest_analysis: Optional[AnalysisRecordResponse] = None
    snapshots: List[SnapshotResponse] = []
    recent_checkins: List[AnalysisRecordResponse] = []
    trait_trends: List[TraitTrend] = []
    trends_source: Optional[Literal["snapshots", "checkins"]] = None
    has_data: bool = False


class UserStatsResponse(BaseModel):
    user_id: str
    total_analyses: int
    current_streak: int
    average_score: float
    baseline_traits: Optional[PersonalityTraits] = None
    last_analysis_date: Optional[dt.date] = None
