"""User profile domain model."""

from dataclasses import dataclass
from enum import Enum


class Gender(Enum):
    """Genders supported by the BMR formulas."""

    MALE = "male"
    FEMALE = "female"


@dataclass(frozen=True)
class UserProfile:
    """Body measurements used to compute a calorie target."""

    gender: Gender
    height_cm: float
    age_years: int
    weight_kg: float
    activity_multiplier: float

    def __str__(self) -> str:
        return (
            f"{self.gender.value}, {self.height_cm:g} cm, {self.age_years} y, "
            f"{self.weight_kg:g} kg, activity {self.activity_multiplier:g}"
        )
