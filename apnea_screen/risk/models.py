import math
from dataclasses import dataclass
from enum import Enum

from apnea_screen.risk.exceptions import InvalidProfileError


class Gender(str, Enum):
    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"


class RiskLevel(str, Enum):
    LOW = "Low"
    MODERATE = "Moderate"
    HIGH = "High"


@dataclass(frozen=True)
class HealthProfile:
    """Questionnaire answers for one scoring call."""

    age: int
    gender: Gender
    height_cm: float
    weight_kg: float
    snoring: bool = False
    tired: bool = False
    observed_apnea: bool = False
    high_blood_pressure: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.age, bool) or not isinstance(self.age, int) or self.age <= 0:
            raise InvalidProfileError(f"age must be a positive integer, got {self.age!r}")
        if not math.isfinite(self.height_cm) or self.height_cm <= 0:
            raise InvalidProfileError(f"height_cm must be a positive number, got {self.height_cm!r}")
        if not math.isfinite(self.weight_kg) or self.weight_kg <= 0:
            raise InvalidProfileError(f"weight_kg must be a positive number, got {self.weight_kg!r}")
        if not isinstance(self.gender, Gender):
            try:
                object.__setattr__(self, "gender", Gender(self.gender))
            except ValueError as exc:
                raise InvalidProfileError(f"unknown gender {self.gender!r}") from exc


@dataclass(frozen=True)
class RiskResult:
    score: int
    level: RiskLevel
    bmi: float
    message: str
    next_steps: tuple[str, ...]
