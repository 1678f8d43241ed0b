# app/models/achieved_milestone_model.py
from sqlalchemy import Column, Integer, String, Text, Date, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship
from config.database import Base

class AchievedMilestone(Base):
    __tablename__ = "achieved_milestones"

    id = Column(Integer, primary_key=True, index=True)
    baby_id = Column(Integer, ForeignKey("babies.id", ondelete="CASCADE"), nullable=False, index=True)
    # points into the static catalog; (baby_id, milestone_id) is not unique
    milestone_id = Column(Integer, nullable=False)
    achieved_at = Column(Date, nullable=False)
    photo_url = Column(String, nullable=True)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime, server_default=func.now())

    baby = relationship("Baby", back_populates="achieved_milestones")
