"""Adaptive load engine.

Stateless autoregulation: callers thread fatigue and RPE history
through explicitly.
"""

from liftguard.domains.autoregulation.deload import calculate_optimal_deload, determine_deload_need
from liftguard.domains.autoregulation.fatigue import analyze_rpe_trend, track_cumulative_fatigue
from liftguard.domains.autoregulation.load import calculate_adaptive_load
from liftguard.domains.autoregulation.models import (
    DeloadRecommendation,
    DeloadType,
    DetailedDeloadProtocol,
    LoadRecommendation,
    PeriodizationPhase,
    RecoveryProfile,
    RPETrend,
    SessionFeedback,
    WeeklyProgression,
)
from liftguard.domains.autoregulation.periodization import (
    PERIODIZATION_MODELS,
    generate_phase_progression,
    periodization_model_for,
    project_adaptation,
)

__all__ = [
    "PERIODIZATION_MODELS",
    "DeloadRecommendation",
    "DeloadType",
    "DetailedDeloadProtocol",
    "LoadRecommendation",
    "PeriodizationPhase",
    "RPETrend",
    "RecoveryProfile",
    "SessionFeedback",
    "WeeklyProgression",
    "analyze_rpe_trend",
    "calculate_adaptive_load",
    "calculate_optimal_deload",
    "determine_deload_need",
    "generate_phase_progression",
    "periodization_model_for",
    "project_adaptation",
    "track_cumulative_fatigue",
]
