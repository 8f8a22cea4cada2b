"""Progression and certification rules.

Pure functions only: no database access, no clock, no mutation of arguments.
Every level/threshold decision in the service goes through this module.
"""
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from app.core.constants import StageEnum, LevelEnum, STAGE_LEVELS
from app.schemas.user import Standing


class Outcome(BaseModel):
    certified_level: Optional[LevelEnum] = None
    can_proceed: bool = False
    retake_allowed: bool = True
    # False when the band leaves the held level untouched
    changes_level: bool = True

    model_config = ConfigDict(frozen=True)


# Lower bound of each band, checked from the top down. Stage 3 has no
# separate [50, 75) band: everything from 50% up certifies C2.
_BANDS = {
    StageEnum.STAGE_1: (
        (75.0, Outcome(certified_level=LevelEnum.A2, can_proceed=True)),
        (50.0, Outcome(certified_level=LevelEnum.A2)),
        (25.0, Outcome(certified_level=LevelEnum.A1)),
        (0.0, Outcome(certified_level=None, retake_allowed=False, changes_level=False)),
    ),
    StageEnum.STAGE_2: (
        (75.0, Outcome(certified_level=LevelEnum.B2, can_proceed=True)),
        (50.0, Outcome(certified_level=LevelEnum.B2)),
        (25.0, Outcome(certified_level=LevelEnum.B1)),
        (0.0, Outcome(certified_level=LevelEnum.A2, changes_level=False)),
    ),
    StageEnum.STAGE_3: (
        (50.0, Outcome(certified_level=LevelEnum.C2)),
        (25.0, Outcome(certified_level=LevelEnum.C1)),
        (0.0, Outcome(certified_level=LevelEnum.B2, changes_level=False)),
    ),
}

_START_LEVELS = {
    StageEnum.STAGE_1: (None, LevelEnum.A1, LevelEnum.A2),
    StageEnum.STAGE_2: (LevelEnum.A2, LevelEnum.B1, LevelEnum.B2),
    StageEnum.STAGE_3: (LevelEnum.B2, LevelEnum.C1, LevelEnum.C2),
}


def _as_stage(stage) -> StageEnum:
    try:
        return StageEnum(int(stage))
    except (TypeError, ValueError):
        raise ValueError(f"Unknown test stage: {stage!r}")


def classify_outcome(stage, percentage: float) -> Outcome:
    """Map a stage and its percentage-correct to the certification outcome.

    Bands are half-open on the right: 25.0 lands in [25, 50), 75.0 in [75, 100].
    """
    stage = _as_stage(stage)
    if percentage is None or not 0 <= percentage <= 100:
        raise ValueError(f"Percentage must be within [0, 100], got {percentage!r}")

    for lower_bound, outcome in _BANDS[stage]:
        if percentage >= lower_bound:
            return outcome
    raise AssertionError("bands cover [0, 100]")


def can_start_stage(stage, standing: Standing) -> bool:
    stage = _as_stage(stage)
    if stage == StageEnum.STAGE_1 and not standing.can_retake:
        return False
    return standing.level in _START_LEVELS[stage]


def stage_levels(stage) -> Tuple[LevelEnum, LevelEnum]:
    return STAGE_LEVELS[_as_stage(stage)]


def available_stages(standing: Standing) -> List[StageEnum]:
    return [stage for stage in StageEnum if can_start_stage(stage, standing)]
