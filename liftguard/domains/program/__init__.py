"""Program guardian domain.

Deterministic corrections for LLM-generated training programs.
"""

from liftguard.domains.program.enums import ExperienceLevel, Muscle, PrimaryFocus, SplitType
from liftguard.domains.program.guardian import apply_guardian
from liftguard.domains.program.models import (
    Exercise,
    ExerciseMapping,
    GuardianNotes,
    GuardianOptions,
    GuardianResult,
    TrainingProgram,
    VolumeRange,
    Workout,
)
from liftguard.domains.program.muscle_map import map_exercise_to_muscles, muscle_split
from liftguard.domains.program.volume import estimate_weekly_sets, expected_volume

__all__ = [
    "Exercise",
    "ExerciseMapping",
    "ExperienceLevel",
    "GuardianNotes",
    "GuardianOptions",
    "GuardianResult",
    "Muscle",
    "PrimaryFocus",
    "SplitType",
    "TrainingProgram",
    "VolumeRange",
    "Workout",
    "apply_guardian",
    "estimate_weekly_sets",
    "expected_volume",
    "map_exercise_to_muscles",
    "muscle_split",
]
