# app/models/growth_record_model.py
from sqlalchemy import Column, Integer, Numeric, Date, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship
from config.database import Base

class GrowthRecord(Base):
    __tablename__ = "growth_records"

    id = Column(Integer, primary_key=True, index=True)
    baby_id = Column(Integer, ForeignKey("babies.id", ondelete="CASCADE"), nullable=False, index=True)
    weight = Column(Numeric(5, 2), nullable=False)  # kg
    height = Column(Numeric(5, 2), nullable=False)  # cm
    recorded_at = Column(Date, nullable=False)
    created_at = Column(DateTime, server_default=func.now())

    baby = relationship("Baby", back_populates="growth_records")
