import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from app.models.baby_model import Baby
from app.models.auth_models import User
from app.schemas.baby_schema import BabyCreate, BabyUpdate, BabyResponse, AgeResponse, DashboardResponse
from app.schemas.milestone_schema import MilestoneOut
from app.data.milestone_catalog import STANDARD_MILESTONES
from app.utils.age_calculator import InvalidDate, age_view
from app.utils.growth_series import NonNumericMetric, growth_summary
from app.utils.milestone_progress import resolve_progress
from config.database import get_db
from app.dependencies.auth import get_current_user
from app.dependencies.babies import get_owned_baby, growth_records_ascending, achieved_milestones_for
from typing import List

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/babies", tags=["babies"])


def _age_or_422(baby: Baby) -> dict:
    try:
        return age_view(baby.birth_date)._asdict()
    except InvalidDate as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))


# GET: babies of the logged-in user
@router.get("", response_model=List[BabyResponse])
def list_babies(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return db.query(Baby).filter(Baby.user_id == current_user.id).order_by(Baby.id).all()

# POST: create a new baby profile
@router.post("", response_model=BabyResponse, status_code=status.HTTP_201_CREATED)
def create_baby(
    baby: BabyCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    new_baby = Baby(
        user_id=current_user.id,
        name=baby.name,
        gender=baby.gender,
        birth_date=baby.birth_date,
        theme_color=baby.theme_color,
        avatar_url=baby.avatar_url,
    )
    db.add(new_baby)
    db.commit()
    db.refresh(new_baby)
    logger.info("Created baby %s for user %s", new_baby.id, current_user.id)
    return new_baby

# PUT: update one of the user's babies
@router.put("/{baby_id}", response_model=BabyResponse)
def update_baby(
    baby_id: int,
    baby_data: BabyUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    baby = get_owned_baby(db, baby_id, current_user)

    baby.name = baby_data.name or baby.name
    baby.theme_color = baby_data.theme_color or baby.theme_color
    baby.avatar_url = baby_data.avatar_url or baby.avatar_url

    db.commit()
    db.refresh(baby)
    return baby

@router.delete("/{baby_id}")
def delete_baby(
    baby_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    baby = get_owned_baby(db, baby_id, current_user)

    db.delete(baby)
    db.commit()
    logger.info("Deleted baby %s", baby_id)

    return {"message": "Baby profile deleted successfully"}

@router.get("/{baby_id}/age", response_model=AgeResponse)
def get_baby_age(
    baby_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    baby = get_owned_baby(db, baby_id, current_user)
    return _age_or_422(baby)

@router.get("/{baby_id}/dashboard", response_model=DashboardResponse)
def get_dashboard(
    baby_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Everything the home screen shows for one baby:
    - age labels for today
    - latest and previous growth record, and whether weight went up
    - next milestone to reach and the overall milestone progress
    """
    baby = get_owned_baby(db, baby_id, current_user)

    records = growth_records_ascending(db, baby_id)
    try:
        summary = growth_summary(records)
    except NonNumericMetric as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))

    achieved = achieved_milestones_for(db, baby_id)
    progress = resolve_progress(STANDARD_MILESTONES, achieved)

    return {
        "baby": baby,
        "age": _age_or_422(baby),
        "latest_growth": summary.latest,
        "previous_growth": summary.previous,
        "weight_increased": summary.weight_increased,
        "next_milestone": (
            MilestoneOut.from_catalog(progress.next_milestone)
            if progress.next_milestone else None
        ),
        "all_milestones_achieved": progress.all_complete,
        "milestone_progress": progress.progress,
    }
