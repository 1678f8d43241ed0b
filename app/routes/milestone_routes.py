import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List

from config.database import get_db
from app.models.auth_models import User
from app.models.achieved_milestone_model import AchievedMilestone
from app.schemas.milestone_schema import (
    MilestoneOut,
    AchievedMilestoneCreate,
    AchievedMilestoneRead,
    MilestoneProgressResponse,
)
from app.data.milestone_catalog import STANDARD_MILESTONES
from app.dependencies.auth import get_current_user
from app.dependencies.babies import get_owned_baby, achieved_milestones_for
from app.utils.milestone_progress import resolve_progress

logger = logging.getLogger(__name__)

router = APIRouter(tags=["milestones"])


@router.get("/milestones/catalog", response_model=List[MilestoneOut])
def get_catalog():
    return [MilestoneOut.from_catalog(m) for m in STANDARD_MILESTONES]


@router.get("/babies/{baby_id}/milestones", response_model=List[AchievedMilestoneRead])
def list_achieved_milestones(
    baby_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    get_owned_baby(db, baby_id, current_user)
    return achieved_milestones_for(db, baby_id)


@router.post(
    "/babies/{baby_id}/milestones",
    response_model=AchievedMilestoneRead,
    status_code=status.HTTP_201_CREATED,
)
def mark_milestone_achieved(
    baby_id: int,
    data: AchievedMilestoneCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    get_owned_baby(db, baby_id, current_user)

    # re-marking an already achieved milestone is allowed
    achieved = AchievedMilestone(
        baby_id=baby_id,
        milestone_id=data.milestone_id,
        achieved_at=data.achieved_at,
        photo_url=data.photo_url,
        notes=data.notes,
    )
    db.add(achieved)
    db.commit()
    db.refresh(achieved)
    logger.info("Milestone %s achieved by baby %s", achieved.milestone_id, baby_id)
    return achieved


@router.delete("/babies/{baby_id}/milestones/{achieved_id}")
def delete_achieved_milestone(
    baby_id: int,
    achieved_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    get_owned_baby(db, baby_id, current_user)

    achieved = db.query(AchievedMilestone).filter_by(id=achieved_id, baby_id=baby_id).first()
    if not achieved:
        raise HTTPException(status_code=404, detail="Milestone not found.")

    db.delete(achieved)
    db.commit()
    logger.info("Achieved milestone %s removed from baby %s", achieved_id, baby_id)

    return {"message": "Milestone deleted successfully"}


@router.get("/babies/{baby_id}/milestones/progress", response_model=MilestoneProgressResponse)
def get_milestone_progress(
    baby_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    get_owned_baby(db, baby_id, current_user)
    result = resolve_progress(STANDARD_MILESTONES, achieved_milestones_for(db, baby_id))
    return MilestoneProgressResponse.from_progress(result)
