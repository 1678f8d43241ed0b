import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
from typing import List, Optional

from config.database import get_db
from app.models.auth_models import User
from app.models.growth_record_model import GrowthRecord
from app.schemas.growth_schema import GrowthCreate, GrowthRead, GrowthChartResponse
from app.dependencies.auth import get_current_user
from app.dependencies.babies import get_owned_baby, growth_records_ascending
from app.utils.growth_series import GrowthMetric, NonNumericMetric, chart_series, history

logger = logging.getLogger(__name__)

router = APIRouter(tags=["growth"])


@router.get("/growth", response_model=List[GrowthRead])
def list_growth(
    baby_id: Optional[int] = Query(None),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    if baby_id is None:
        raise HTTPException(status_code=400, detail="Baby ID is required")
    get_owned_baby(db, baby_id, current_user)
    return growth_records_ascending(db, baby_id)


@router.post("/growth", response_model=GrowthRead, status_code=status.HTTP_201_CREATED)
def create_growth(
    data: GrowthCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    get_owned_baby(db, data.baby_id, current_user)

    record = GrowthRecord(
        baby_id=data.baby_id,
        weight=data.weight,
        height=data.height,
        recorded_at=data.recorded_at,
    )
    db.add(record)
    db.commit()
    db.refresh(record)
    logger.info("Growth record %s added for baby %s", record.id, record.baby_id)
    return record


@router.get("/babies/{baby_id}/growth", response_model=List[GrowthRead])
def get_growth_history(
    baby_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    get_owned_baby(db, baby_id, current_user)
    return growth_records_ascending(db, baby_id)


@router.get("/babies/{baby_id}/growth/latest", response_model=GrowthRead)
def get_latest_growth(
    baby_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    get_owned_baby(db, baby_id, current_user)

    record = (
        db.query(GrowthRecord)
        .filter_by(baby_id=baby_id)
        .order_by(GrowthRecord.recorded_at.desc(), GrowthRecord.id.desc())
        .first()
    )
    if not record:
        raise HTTPException(status_code=404, detail="No growth records found")
    return record


@router.get("/babies/{baby_id}/growth/chart", response_model=GrowthChartResponse)
def get_growth_chart(
    baby_id: int,
    metric: GrowthMetric = Query(GrowthMetric.WEIGHT),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Chart points (oldest first, one month label per month) and the history
    list (newest first) for the selected metric.
    """
    get_owned_baby(db, baby_id, current_user)

    records = growth_records_ascending(db, baby_id)
    try:
        points = chart_series(records, metric)
        newest_first = history(records, metric)
    except NonNumericMetric as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))

    return {
        "metric": metric.value,
        "points": [vars(p) for p in points],
        "history": [vars(p) for p in newest_first],
    }
