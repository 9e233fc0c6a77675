"""Program guardian.

Deterministic post-generation corrections for LLM-produced programs:
- A: day-split template conformance
- B: weekly per-muscle volume harmonization
- C: banned exercise substitution

Stages run in that fixed order: volume targets depend on focus labels
being correct, and substitution never changes structure or volume.
The caller's program is never mutated; corrections apply to a deep copy.
"""

from liftguard.domains.program.models import (
    GuardianNotes,
    GuardianOptions,
    GuardianResult,
    TrainingProgram,
)
from liftguard.domains.program.observability import GuardianStage, log_event, timing
from liftguard.domains.program.substitution import replace_banned_exercises
from liftguard.domains.program.taxonomy import Taxonomy, default_taxonomy
from liftguard.domains.program.templates import enforce_split_template
from liftguard.domains.program.volume import harmonize_volume


def apply_guardian(
    program: TrainingProgram,
    opts: GuardianOptions,
    taxonomy: Taxonomy | None = None,
) -> GuardianResult:
    """Correct a program and narrate every correction.

    Args:
        program: Candidate program (not modified)
        opts: User focus, experience, days per week and session length
        taxonomy: Taxonomy to correct against (default: configured taxonomy)

    Returns:
        GuardianResult with the corrected program, the ordered correction
        notes and the final weekly sets per muscle
    """
    tax = taxonomy or default_taxonomy()
    corrected = program.model_copy(deep=True)
    corrections: list[str] = []

    with timing(f"guardian.stage.{GuardianStage.TEMPLATE}"):
        corrections.extend(enforce_split_template(corrected, opts, tax))

    with timing(f"guardian.stage.{GuardianStage.VOLUME}"):
        volume_notes, per_muscle_sets = harmonize_volume(corrected, opts, tax)
        corrections.extend(volume_notes)

    with timing(f"guardian.stage.{GuardianStage.SUBSTITUTION}"):
        corrections.extend(replace_banned_exercises(corrected, tax))

    log_event(
        "guardian_applied",
        primary_focus=opts.primary_focus.value,
        experience_level=opts.experience_level.value,
        training_days_per_week=opts.training_days_per_week,
        workouts=len(corrected.workouts),
        corrections=len(corrections),
    )

    return GuardianResult(
        program=corrected,
        notes=GuardianNotes(corrections=corrections, per_muscle_sets=per_muscle_sets),
    )
