from sqlalchemy import Column, Integer, String, Date, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship
from config.database import Base

class Baby(Base):
    __tablename__ = "babies"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    name = Column(String(255), nullable=False)
    gender = Column(String(16), nullable=False)
    birth_date = Column(Date, nullable=False)
    theme_color = Column(String(32), nullable=False)
    avatar_url = Column(String, nullable=True)  # stored elsewhere, we keep the URL
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    parent = relationship("User", back_populates="babies")
    growth_records = relationship("GrowthRecord", back_populates="baby", cascade="all, delete")
    achieved_milestones = relationship("AchievedMilestone", back_populates="baby", cascade="all, delete")
