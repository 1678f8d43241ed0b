# seed_growth.py
# Fills a baby's growth history with sample records for local development.
# Usage: python seed_growth.py [baby name]

import random
import sys
from datetime import date, timedelta
from decimal import Decimal

from sqlalchemy.orm import Session

from config.database import Base, SessionLocal, engine
from app.models.auth_models import User  # noqa: F401
from app.models.baby_model import Baby
from app.models.growth_record_model import GrowthRecord
from app.models.achieved_milestone_model import AchievedMilestone  # noqa: F401


def seed_growth(db: Session, baby_name: str = "Adam", rng: random.Random = None):
    """
    Twelve records, one every two weeks starting a week after birth.
    Returns the created records, [] if the baby already has growth data,
    or None if no baby has that name. Dates after today are skipped.
    """
    rng = rng or random.Random()

    baby = db.query(Baby).filter_by(name=baby_name).first()
    if not baby:
        return None

    if db.query(GrowthRecord).filter_by(baby_id=baby.id).first():
        return []

    current_date = baby.birth_date + timedelta(days=7)
    weight = 3.5   # kg
    height = 50.0  # cm

    records = []
    for _ in range(12):
        if current_date > date.today():
            break

        # 0.30 - 0.50 kg and 1.0 - 2.0 cm every two weeks
        weight += (0.15 + rng.randint(0, 10) / 100) * 2
        height += (0.5 + rng.randint(0, 5) / 10) * 2

        records.append(GrowthRecord(
            baby_id=baby.id,
            weight=Decimal(str(round(weight + weight * rng.randint(-5, 5) / 100, 2))),
            height=Decimal(str(round(height + height * rng.randint(-2, 2) / 100, 1))),
            recorded_at=current_date,
        ))
        current_date += timedelta(weeks=2)

    db.add_all(records)
    db.commit()
    return records


if __name__ == "__main__":
    name = sys.argv[1] if len(sys.argv) > 1 else "Adam"
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        created = seed_growth(db, name)
    finally:
        db.close()

    if created is None:
        print(f'No baby named "{name}" found. Create the profile first.')
    elif not created:
        print(f"Growth records already exist for {name}. Skipping...")
    else:
        print(f"Created {len(created)} growth records for {name}: "
              f"{created[0].recorded_at} to {created[-1].recorded_at}")
