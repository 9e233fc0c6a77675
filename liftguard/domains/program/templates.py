"""Day-split template enforcement.

LLM-generated programs often drift from the expected split: days labelled
"Lower Strength" in a Push/Pull/Legs week, seven days when six were asked
for. This step relabels, trims and pads workouts to the template for the
user's focus, experience and days per week. Exercises are never moved.
"""

from loguru import logger

from liftguard.domains.program.models import GuardianOptions, TrainingProgram
from liftguard.domains.program.taxonomy import Taxonomy, default_taxonomy

DAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")


def focus_matches_label(focus: str, label: str) -> bool:
    """Loose match: the label's first word appears in the focus text.

    "Upper Push" matches "Push"; "Full Body A" matches "Full Body (Upper-Biased)".
    """
    key = label.split(" ")[0].lower()
    return key in focus.lower()


def enforce_split_template(
    program: TrainingProgram,
    opts: GuardianOptions,
    taxonomy: Taxonomy | None = None,
) -> list[str]:
    """Conform program workouts to the expected day-split template.

    Steps:
    1. Trim workouts beyond the template length
    2. Relabel each workout's focus and name to its slot label
    3. Pad short programs by cloning the last workout

    Args:
        program: Program to correct (modified in place)
        opts: Guardian options (focus, experience, days per week)
        taxonomy: Taxonomy holding the templates (default: configured taxonomy)

    Returns:
        Correction notes, empty if the program already conforms
    """
    notes: list[str] = []
    tax = taxonomy or default_taxonomy()
    template = tax.template_for(opts.primary_focus, opts.experience_level, opts.training_days_per_week)
    if template is None or not program.workouts:
        return notes

    original_count = len(program.workouts)
    if original_count > len(template):
        program.workouts = program.workouts[: len(template)]
        notes.append(f"Trimmed extra workouts from {original_count} → {len(template)}")

    for i, workout in enumerate(program.workouts):
        label = template[i]
        if not focus_matches_label(workout.focus, label):
            notes.append(f'Renamed focus "{workout.focus}" → "{label}" on workout {i + 1}')
        workout.focus = label
        workout.name = f"{DAY_NAMES[i]} - {label}"

    last = program.workouts[-1]
    while len(program.workouts) < len(template):
        slot = len(program.workouts)
        label = template[slot]
        clone = last.model_copy(deep=True)
        clone.focus = label
        clone.name = f"{DAY_NAMES[slot]} - {label}"
        if clone.model_extra and "id" in clone.model_extra:
            clone.id = f"{clone.model_extra['id']}-slot{slot + 1}"
        program.workouts.append(clone)
        notes.append(f"Duplicated last workout to fill slot {slot + 1} ({label})")

    if notes:
        logger.debug(
            "Split template enforced",
            template=" / ".join(template),
            original_workouts=original_count,
            corrections=len(notes),
        )
    return notes
