"""Root conftest for all tests.

This file makes shared fixtures available across all test modules.
"""

import sys
from collections.abc import Callable

import pytest
from loguru import logger

from liftguard.config.settings import get_settings
from liftguard.domains.program.models import Exercise, TrainingProgram, Workout

WorkoutSpec = tuple[str, str, list[tuple[str, int]]]


def _make_program(workouts: list[WorkoutSpec]) -> TrainingProgram:
    return TrainingProgram(
        workouts=[
            Workout(
                name=name,
                focus=focus,
                main_exercises=[Exercise(name=ex_name, sets=sets) for ex_name, sets in exercises],
            )
            for name, focus, exercises in workouts
        ]
    )


@pytest.fixture
def make_program() -> Callable[[list[WorkoutSpec]], TrainingProgram]:
    """Build a program from (name, focus, [(exercise, sets), ...]) tuples."""
    return _make_program


@pytest.fixture
def log_records():
    """Capture loguru records emitted during a test.

    Usage:
        def test_something(log_records):
            ...
            assert any(r["message"] == "guardian_applied" for r in log_records)
    """
    records: list[dict] = []
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove(handler_id)


@pytest.fixture(autouse=True)
def reset_settings():
    """Drop cached settings so env changes in one test never leak into another."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def restore_logger():
    """Restore a plain stderr sink after tests that reconfigure loguru."""
    yield
    logger.remove()
    logger.add(sys.stderr, level="DEBUG")
