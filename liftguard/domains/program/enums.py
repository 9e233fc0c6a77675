"""Canonical enums for training programs.

All enums are string-based to ensure JSON serialization compatibility
and alignment with the taxonomy document keys.
"""

from enum import StrEnum


# -----------------------------
# Muscles
# -----------------------------
class Muscle(StrEnum):
    """Muscle groups tracked for weekly set volume.

    Declaration order is the order in which volume is harmonized.
    """

    CHEST = "chest"
    BACK = "back"
    DELTS_FRONT = "delts_front"
    DELTS_SIDE = "delts_side"
    DELTS_REAR = "delts_rear"
    BICEPS = "biceps"
    TRICEPS = "triceps"
    QUADS = "quads"
    HAMSTRINGS = "hamstrings"
    GLUTES = "glutes"
    CALVES = "calves"


# -----------------------------
# User Goal
# -----------------------------
class PrimaryFocus(StrEnum):
    """User's primary training goal."""

    HYPERTROPHY = "hypertrophy"
    STRENGTH = "strength"
    GENERAL_FITNESS = "general_fitness"


class ExperienceLevel(StrEnum):
    """User's training experience."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


# -----------------------------
# Split
# -----------------------------
class SplitType(StrEnum):
    """Day split a muscle is primarily trained on."""

    PUSH = "push"
    PULL = "pull"
    LEGS = "legs"
