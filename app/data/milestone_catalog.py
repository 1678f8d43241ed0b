# app/data/milestone_catalog.py

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class MilestoneCategory(str, Enum):
    SOCIAL = "social"
    MOTOR = "motor"
    COGNITIVE = "cognitive"
    LANGUAGE = "language"


class MilestoneIcon(str, Enum):
    # closed set rendered by the mobile client
    SMILE = "Smile"
    FOOTPRINTS = "Footprints"
    UTENSILS = "Utensils"
    BABY = "Baby"
    HEART = "Heart"
    EYE = "Eye"
    HAND = "Hand"
    SPEECH = "Speech"
    ACTIVITY = "Activity"
    BOOK_OPEN = "BookOpen"
    MUSIC = "Music"
    CAMERA = "Camera"


@dataclass(frozen=True)
class Milestone:
    id: int
    title: str
    description: str
    expected_month: int
    icon: MilestoneIcon
    category: MilestoneCategory


STANDARD_MILESTONES: tuple[Milestone, ...] = (
    Milestone(1, "First Smile", "Baby's first social smile", 2,
              MilestoneIcon.SMILE, MilestoneCategory.SOCIAL),
    Milestone(2, "Head Control", "Holds head up steadily", 3,
              MilestoneIcon.BABY, MilestoneCategory.MOTOR),
    Milestone(3, "Rolling Over", "Rolls from tummy to back", 4,
              MilestoneIcon.ACTIVITY, MilestoneCategory.MOTOR),
    Milestone(4, "First Laugh", "Baby's first real laugh", 4,
              MilestoneIcon.HEART, MilestoneCategory.SOCIAL),
    Milestone(5, "Sitting Up", "Sits without support", 6,
              MilestoneIcon.BABY, MilestoneCategory.MOTOR),
    Milestone(6, "First Words", 'Says "mama" or "dada"', 6,
              MilestoneIcon.SPEECH, MilestoneCategory.LANGUAGE),
    Milestone(7, "Crawling", "Starts to crawl", 8,
              MilestoneIcon.FOOTPRINTS, MilestoneCategory.MOTOR),
    Milestone(8, "Pincer Grasp", "Picks up objects with thumb and finger", 9,
              MilestoneIcon.HAND, MilestoneCategory.MOTOR),
    Milestone(9, "Standing", "Pulls up to standing position", 10,
              MilestoneIcon.FOOTPRINTS, MilestoneCategory.MOTOR),
    Milestone(10, "First Steps", "Takes first independent steps", 12,
              MilestoneIcon.FOOTPRINTS, MilestoneCategory.MOTOR),
    Milestone(11, "Self-Feeding", "Eats finger foods independently", 9,
              MilestoneIcon.UTENSILS, MilestoneCategory.MOTOR),
    Milestone(12, "Waving Bye-Bye", "Waves hello and goodbye", 9,
              MilestoneIcon.HAND, MilestoneCategory.SOCIAL),
)

_BY_ID = {m.id: m for m in STANDARD_MILESTONES}


def get_milestone(milestone_id: int) -> Optional[Milestone]:
    return _BY_ID.get(milestone_id)
