# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the InkScore - Handwriting Personality Insights project.
# Licensed under the MIT License - see the LICENSE file for details.

import uuid
from sqlalchemy import Column, Integer, String, Text, Float, DateTime, ForeignKey, JSON
from sqlalchemy.orm import relationship
from datetime import datetime
from inkscore.models.database import Base


class HandwritingCheckin(Base):
    """One completed analysis. Written once, never updated."""
    __tablename__ = "handwriting_checkins"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String, ForeignKey("users.id"), nullable=False, index=True)
    created_at = Column(DateTime, default=datetime.utcnow, index=True)

    features = Column(JSON, nullable=False)        # {"SLN": 0.4, ...}
    traits = Column(JSON, nullable=False)          # {"CNF": 0.8, ...}
    traits_source = Column(String, default="vision")  # "vision" / "derived"
    formula_version = Column(Integer, nullable=True)  # set when derived

    overall_score = Column(Float, nullable=False)
    confidence_score = Column(Float, nullable=False)

    # Narrative payload from the vision service (not interpreted)
    ai_analysis = Column(JSON, nullable=True)
    gpt_summary = Column(Text, nullable=True)
    processing_time_ms = Column(Integer, nullable=True)

    user = relationship("User", back_populates="checkins")
