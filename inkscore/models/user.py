# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the InkScore - Handwriting Personality Insights project.
# Licensed under the MIT License - see the LICENSE file for details.


from sqlalchemy import Column, Integer, String, DateTime, Date, Float, JSON
from sqlalchemy.orm import relationship
from datetime import datetime
from inkscore.models.database import Base


class User(Base):
    __tablename__ = "users"

    # ✅ Same id as the auth provider's user (JWT "sub")
    id = Column(String, primary_key=True, index=True)
    email = Column(String, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    # ✅ Analysis stats, refreshed after every stored analysis
    total_analyses = Column(Integer, default=0)
    current_streak = Column(Integer, default=0)
    average_score = Column(Float, default=0.0)
    last_analysis_date = Column(Date, nullable=True)

    # ✅ Traits from the very first analysis; never overwritten
    baseline_traits = Column(JSON, nullable=True)

    # ✅ Relationships
    checkins = relationship("HandwritingCheckin", back_populates="user", cascade="all, delete-orphan")
    snapshots = relationship("PersonalitySnapshot", back_populates="user", cascade="all, delete-orphan")
    profile = relationship("UserProfile", back_populates="user", uselist=False, cascade="all, delete-orphan")
