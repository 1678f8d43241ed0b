from typing import List

from fastapi import HTTPException
from sqlalchemy.orm import Session
from app.models.baby_model import Baby
from app.models.auth_models import User
from app.models.growth_record_model import GrowthRecord
from app.models.achieved_milestone_model import AchievedMilestone

def get_owned_baby(db: Session, baby_id: int, user: User) -> Baby:
    """Baby row if it belongs to `user`, else 404."""
    baby = db.query(Baby).filter_by(id=baby_id, user_id=user.id).first()
    if not baby:
        raise HTTPException(status_code=404, detail="Baby not found.")
    return baby

def growth_records_ascending(db: Session, baby_id: int) -> List[GrowthRecord]:
    # oldest to newest
    return (
        db.query(GrowthRecord)
        .filter_by(baby_id=baby_id)
        .order_by(GrowthRecord.recorded_at.asc(), GrowthRecord.id.asc())
        .all()
    )

def achieved_milestones_for(db: Session, baby_id: int) -> List[AchievedMilestone]:
    # newest first; same-day duplicates resolve to the latest insert
    return (
        db.query(AchievedMilestone)
        .filter_by(baby_id=baby_id)
        .order_by(AchievedMilestone.achieved_at.desc(), AchievedMilestone.id.desc())
        .all()
    )
