"""Daily calorie targets from two BMR formulas."""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from yada.domain.profile import Gender, UserProfile
from yada.errors import InvalidInputError


def harris_benedict_bmr(profile: UserProfile) -> float:
    """Revised Harris-Benedict BMR."""
    if profile.gender is Gender.MALE:
        return (
            66.5
            + 13.75 * profile.weight_kg
            + 5.003 * profile.height_cm
            - 6.75 * profile.age_years
        )
    return (
        655.1
        + 9.563 * profile.weight_kg
        + 1.850 * profile.height_cm
        - 4.676 * profile.age_years
    )


def mifflin_st_jeor_bmr(profile: UserProfile) -> float:
    """Mifflin-St Jeor BMR."""
    base = 10 * profile.weight_kg + 6.25 * profile.height_cm - 5 * profile.age_years
    if profile.gender is Gender.MALE:
        return base + 5
    return base - 161


class GoalMethod(Enum):
    """Selectable BMR formula."""

    METHOD_ONE = "method_one"
    METHOD_TWO = "method_two"

    @property
    def formula(self) -> Callable[[UserProfile], float]:
        return _FORMULAS[self]


_FORMULAS: dict[GoalMethod, Callable[[UserProfile], float]] = {
    GoalMethod.METHOD_ONE: harris_benedict_bmr,
    GoalMethod.METHOD_TWO: mifflin_st_jeor_bmr,
}


@dataclass(frozen=True)
class GoalReport:
    """Consumed versus target calories for a date."""

    date: str
    consumed: int
    target: float

    @property
    def difference(self) -> float:
        """Positive when over target, negative when calories remain."""
        return self.consumed - self.target


def target_calories(profile: UserProfile | None, method: GoalMethod) -> float:
    """Return BMR scaled by the activity multiplier."""
    if profile is None:
        raise InvalidInputError("User profile not set")
    return method.formula(profile) * profile.activity_multiplier


def build_profile(
    gender: str,
    height_cm: float,
    age_years: int,
    weight_kg: float,
    activity_multiplier: float,
) -> UserProfile:
    """Validate raw values and return a profile."""
    try:
        parsed_gender = Gender(gender.strip().lower())
    except ValueError as exc:
        raise InvalidInputError("Gender must be male or female") from exc
    for label, value in (
        ("Height", height_cm),
        ("Age", age_years),
        ("Weight", weight_kg),
        ("Activity multiplier", activity_multiplier),
    ):
        if value <= 0:
            raise InvalidInputError(f"{label} must be positive")
    return UserProfile(
        gender=parsed_gender,
        height_cm=float(height_cm),
        age_years=int(age_years),
        weight_kg=float(weight_kg),
        activity_multiplier=float(activity_multiplier),
    )
