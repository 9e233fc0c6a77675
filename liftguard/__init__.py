"""liftguard - deterministic corrections and autoregulation for strength programs.

This package provides:
- Program guardian: split-template conformance, weekly volume
  harmonization and banned exercise substitution for LLM-generated programs
- Adaptive load engine: RPE- and fatigue-driven load recommendations,
  cumulative fatigue tracking and deload decisions

All operations are pure computations over explicit arguments.
"""

from liftguard.domains.autoregulation import (
    DeloadRecommendation,
    LoadRecommendation,
    RecoveryProfile,
    RPETrend,
    SessionFeedback,
    analyze_rpe_trend,
    calculate_adaptive_load,
    determine_deload_need,
    track_cumulative_fatigue,
)
from liftguard.domains.program import (
    Exercise,
    GuardianOptions,
    GuardianResult,
    Muscle,
    TrainingProgram,
    Workout,
    apply_guardian,
    estimate_weekly_sets,
    expected_volume,
    map_exercise_to_muscles,
)
from liftguard.errors import AutoregulationError, LiftguardError, TaxonomyError

__all__ = [
    "AutoregulationError",
    "DeloadRecommendation",
    "Exercise",
    "GuardianOptions",
    "GuardianResult",
    "LiftguardError",
    "LoadRecommendation",
    "Muscle",
    "RPETrend",
    "RecoveryProfile",
    "SessionFeedback",
    "TaxonomyError",
    "TrainingProgram",
    "Workout",
    "analyze_rpe_trend",
    "apply_guardian",
    "calculate_adaptive_load",
    "determine_deload_need",
    "estimate_weekly_sets",
    "expected_volume",
    "map_exercise_to_muscles",
    "track_cumulative_fatigue",
]
