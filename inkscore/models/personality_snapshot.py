# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the InkScore - Handwriting Personality Insights project.
# Licensed under the MIT License - see the LICENSE file for details.

from sqlalchemy import Column, Integer, String, Date, DateTime, ForeignKey, JSON, UniqueConstraint
from sqlalchemy.orm import relationship
from datetime import datetime
from inkscore.models.database import Base

class PersonalitySnapshot(Base):
    __tablename__ = "personality_snapshots"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String, ForeignKey("users.id"), nullable=False, index=True)
    snapshot_date = Column(Date, nullable=False, index=True)
    avg_traits = Column(JSON, nullable=False)  # mean of the day's checkin traits
    analysis_count = Column(Integer, default=0)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    user = relationship("User", back_populates="snapshots")

    __table_args__ = (UniqueConstraint("user_id", "snapshot_date", name="uq_user_snapshot_date"),)
