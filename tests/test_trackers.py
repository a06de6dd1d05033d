from __future__ import annotations

import pytest

from wellness_tracker.model import (
    DEFAULT_MEALS,
    DecrementGlasses,
    FitnessState,
    HydrationState,
    IncrementGlasses,
    MealPlannerState,
    MentalWellnessState,
    MoodToken,
    SetMood,
    SetStepsInput,
)
from wellness_tracker.trackers import (
    is_valid_steps,
    progress_fraction,
    reduce_fitness,
    reduce_hydration,
    reduce_meal_planner,
    reduce_mental_wellness,
)


@pytest.mark.parametrize("raw", ["", "0", "5000", "0012", "123456789"])
def test_fitness_accepts_digits(raw: str) -> None:
    state = reduce_fitness(FitnessState(invalid=True), SetStepsInput(raw))
    assert state.steps_input == raw
    assert state.invalid is False


@pytest.mark.parametrize("raw", ["12a", "-5", "1.5", " 10", "abc", "１２", "²"])
def test_fitness_rejects_non_digits(raw: str) -> None:
    before = FitnessState(steps_input="42")
    state = reduce_fitness(before, SetStepsInput(raw))
    assert state.steps_input == "42"
    assert state.invalid is True


def test_fitness_valid_edit_clears_invalid_flag() -> None:
    state = reduce_fitness(FitnessState(), SetStepsInput("x"))
    assert state.invalid is True
    state = reduce_fitness(state, SetStepsInput("7"))
    assert state == FitnessState(steps_input="7", invalid=False)


def test_fitness_unknown_action() -> None:
    with pytest.raises(TypeError):
        reduce_fitness(FitnessState(), IncrementGlasses())


def test_is_valid_steps() -> None:
    assert is_valid_steps("")
    assert is_valid_steps("0123")
    assert not is_valid_steps("12\n")


def test_progress_fraction() -> None:
    state = reduce_fitness(FitnessState(), SetStepsInput("5000"))
    assert progress_fraction(state) == 0.5
    state = reduce_fitness(state, SetStepsInput(""))
    assert progress_fraction(state) == 0.0


def test_progress_fraction_is_not_clamped() -> None:
    assert progress_fraction(FitnessState(steps_input="25000")) == 2.5


def test_progress_fraction_unparsable_counts_as_zero() -> None:
    assert progress_fraction(FitnessState(steps_input="n/a")) == 0.0


def test_hydration_decrement_at_zero_is_noop() -> None:
    state = reduce_hydration(HydrationState(), DecrementGlasses())
    assert state.glasses == 0


@pytest.mark.parametrize("n", [0, 1, 3, 25])
def test_hydration_increments(n: int) -> None:
    state = HydrationState()
    for _ in range(n):
        state = reduce_hydration(state, IncrementGlasses())
    assert state.glasses == n


def test_hydration_decrement_after_increments() -> None:
    state = HydrationState(glasses=2)
    state = reduce_hydration(state, DecrementGlasses())
    state = reduce_hydration(state, DecrementGlasses())
    state = reduce_hydration(state, DecrementGlasses())
    assert state.glasses == 0


def test_hydration_unknown_action() -> None:
    with pytest.raises(TypeError):
        reduce_hydration(HydrationState(), SetMood(MoodToken.SAD))


def test_mood_defaults_to_neutral_and_is_set() -> None:
    state = MentalWellnessState()
    assert state.mood is MoodToken.NEUTRAL
    state = reduce_mental_wellness(state, SetMood(MoodToken.HAPPY))
    assert state.mood is MoodToken.HAPPY


def test_mood_unknown_action() -> None:
    with pytest.raises(TypeError):
        reduce_mental_wellness(MentalWellnessState(), SetStepsInput("1"))


def test_meal_planner_is_display_only() -> None:
    state = MealPlannerState()
    assert list(state.meals) == [
        "Breakfast: Oats",
        "Lunch: Salad",
        "Dinner: Grilled Chicken",
    ]
    for action in (IncrementGlasses(), SetStepsInput("1"), SetMood(MoodToken.SAD)):
        state = reduce_meal_planner(state, action)
    assert state.meals == DEFAULT_MEALS


@pytest.mark.parametrize("digits", [400, 5000])
def test_progress_fraction_for_very_long_inputs(digits: int) -> None:
    state = reduce_fitness(FitnessState(), SetStepsInput("9" * digits))
    assert state.invalid is False
    assert progress_fraction(state) == float("inf")
