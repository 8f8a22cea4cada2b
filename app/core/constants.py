from enum import Enum, IntEnum


class RoleEnum(str, Enum):
    ADMIN = "admin"
    STUDENT = "student"
    SUPERVISOR = "supervisor"

class StageEnum(IntEnum):
    STAGE_1 = 1
    STAGE_2 = 2
    STAGE_3 = 3

class LevelEnum(str, Enum):
    A1 = "A1"
    A2 = "A2"
    B1 = "B1"
    B2 = "B2"
    C1 = "C1"
    C2 = "C2"

    @property
    def rank(self) -> int:
        return list(LevelEnum).index(self)

    def __lt__(self, other):
        if not isinstance(other, LevelEnum):
            return NotImplemented
        return self.rank < other.rank

class AttemptStatusEnum(str, Enum):
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"

class CompletionReasonEnum(str, Enum):
    SUBMITTED = "submitted"
    EXPIRED = "expired"

class DifficultyEnum(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

class CompetencyAreaEnum(str, Enum):
    DIGITAL_LITERACY = "digital_literacy"
    INFORMATION_MANAGEMENT = "information_management"
    COMMUNICATION = "communication"
    COLLABORATION = "collaboration"
    CONTENT_CREATION = "content_creation"
    SAFETY = "safety"
    PROBLEM_SOLVING = "problem_solving"
    CAREER_DEVELOPMENT = "career_development"


STAGE_LEVELS = {
    StageEnum.STAGE_1: (LevelEnum.A1, LevelEnum.A2),
    StageEnum.STAGE_2: (LevelEnum.B1, LevelEnum.B2),
    StageEnum.STAGE_3: (LevelEnum.C1, LevelEnum.C2),
}

STAGE_DESCRIPTIONS = {
    StageEnum.STAGE_1: "Basic digital competency assessment covering fundamental computer skills",
    StageEnum.STAGE_2: "Intermediate digital competency assessment covering advanced computer skills",
    StageEnum.STAGE_3: "Advanced digital competency assessment covering expert-level skills",
}

MIN_OPTIONS_PER_QUESTION = 2
MAX_OPTIONS_PER_QUESTION = 4
