"""Reducers puros de cada tracker y registro pagina -> tracker."""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import Any

from wellness_tracker.model import (
    STEPS_GOAL,
    DecrementGlasses,
    FitnessState,
    HydrationState,
    IncrementGlasses,
    MealPlannerState,
    MentalWellnessState,
    Page,
    SetMood,
    SetStepsInput,
)

_DIGITS_RE = re.compile(r"[0-9]*")

Reducer = Callable[[Any, Any], Any]


def is_valid_steps(raw: str) -> bool:
    """Return True for an empty string or ASCII digits only."""
    return _DIGITS_RE.fullmatch(raw) is not None


def reduce_fitness(state: FitnessState, action: object) -> FitnessState:
    """Apply a steps edit; rejected text keeps the previous value."""
    if not isinstance(action, SetStepsInput):
        raise TypeError(f"Unsupported fitness action: {action!r}")
    if is_valid_steps(action.raw):
        return FitnessState(steps_input=action.raw, invalid=False)
    return replace(state, invalid=True)


def progress_fraction(state: FitnessState) -> float:
    """Steps entered as a fraction of the daily goal.

    Empty or unparsable input counts as zero. The value is not clamped, so
    more than ``STEPS_GOAL`` steps yields a fraction above 1.0, and a
    number too large for a float yields ``inf``.
    """
    if not state.steps_input or not is_valid_steps(state.steps_input):
        return 0.0
    # float() has no digit limit; very long inputs become inf.
    return float(state.steps_input) / STEPS_GOAL


def reduce_meal_planner(state: MealPlannerState, _action: object) -> MealPlannerState:
    return state


def reduce_hydration(state: HydrationState, action: object) -> HydrationState:
    if isinstance(action, IncrementGlasses):
        return HydrationState(glasses=state.glasses + 1)
    if isinstance(action, DecrementGlasses):
        return HydrationState(glasses=max(state.glasses - 1, 0))
    raise TypeError(f"Unsupported hydration action: {action!r}")


def reduce_mental_wellness(
    state: MentalWellnessState, action: object
) -> MentalWellnessState:
    if not isinstance(action, SetMood):
        raise TypeError(f"Unsupported mood action: {action!r}")
    return MentalWellnessState(mood=action.mood)


@dataclass(frozen=True)
class TrackerDefinition:
    """How to build the state of one tracker page."""

    initial: Callable[[], Any]
    reducer: Reducer


TRACKERS: dict[Page, TrackerDefinition] = {
    Page.FITNESS: TrackerDefinition(FitnessState, reduce_fitness),
    Page.MEAL_PLANNER: TrackerDefinition(MealPlannerState, reduce_meal_planner),
    Page.HYDRATION: TrackerDefinition(HydrationState, reduce_hydration),
    Page.MENTAL_WELLNESS: TrackerDefinition(
        MentalWellnessState, reduce_mental_wellness
    ),
}
