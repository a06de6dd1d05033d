"""Modelos tipados para paginas, estado de trackers y acciones."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

STEPS_GOAL = 10000
INVALID_STEPS_MESSAGE = "Please enter a valid number"

DEFAULT_MEALS: tuple[str, ...] = (
    "Breakfast: Oats",
    "Lunch: Salad",
    "Dinner: Grilled Chicken",
)


class Page(Enum):
    """Screens reachable from the navigator."""

    HOME = "home"
    FITNESS = "fitness"
    HYDRATION = "hydration"
    MEAL_PLANNER = "meal_planner"
    MENTAL_WELLNESS = "mental_wellness"


class MoodToken(Enum):
    """Closed set of moods; the value is the emoji shown to the user."""

    NEUTRAL = "\U0001f642"
    HAPPY = "\U0001f60a"
    SAD = "\U0001f61e"
    ANGRY = "\U0001f621"

    @property
    def label(self) -> str:
        return self.name.capitalize()


@dataclass(frozen=True)
class FitnessState:
    """Steps text field plus the flag for the validation message."""

    steps_input: str = ""
    invalid: bool = False


@dataclass(frozen=True)
class MealPlannerState:
    """Display-only meal list."""

    meals: tuple[str, ...] = DEFAULT_MEALS


@dataclass(frozen=True)
class HydrationState:
    """Glasses of water; never negative."""

    glasses: int = 0


@dataclass(frozen=True)
class MentalWellnessState:
    mood: MoodToken = MoodToken.NEUTRAL


@dataclass(frozen=True)
class SetStepsInput:
    raw: str


@dataclass(frozen=True)
class IncrementGlasses:
    pass


@dataclass(frozen=True)
class DecrementGlasses:
    pass


@dataclass(frozen=True)
class SetMood:
    mood: MoodToken


@dataclass(frozen=True)
class TrackerCard:
    """Entry of the home menu."""

    page: Page
    title: str
    description: str


HOME_CARDS: tuple[TrackerCard, ...] = (
    TrackerCard(Page.FITNESS, "Fitness Tracker", "Track your workouts and steps."),
    TrackerCard(
        Page.MEAL_PLANNER,
        "Meal Planner",
        "Plan your meals and track daily intake.",
    ),
    TrackerCard(
        Page.MENTAL_WELLNESS,
        "Mental Wellness",
        "Track your mood and meditate.",
    ),
    TrackerCard(
        Page.HYDRATION,
        "Hydration Tracker",
        "Monitor your daily water intake.",
    ),
)
