"""App Kivy: menu principal y pantallas de cada tracker."""

from __future__ import annotations

import logging
import traceback
from collections.abc import Callable
from typing import Any

from wellness_tracker.config import AppConfig
from wellness_tracker.model import (
    HOME_CARDS,
    INVALID_STEPS_MESSAGE,
    DecrementGlasses,
    FitnessState,
    HydrationState,
    IncrementGlasses,
    MealPlannerState,
    MentalWellnessState,
    MoodToken,
    Page,
    SetMood,
    SetStepsInput,
)
from wellness_tracker.navigation import Navigator
from wellness_tracker.store import Store
from wellness_tracker.trackers import progress_fraction

log = logging.getLogger(__name__)

PRIMARY = "#42A5F5"
BACKGROUND = "#E3F2FD"
CARD_BACKGROUND = "#BBDEFB"
ERROR_TEXT = "#E53935"
MUTED_TEXT = "#757575"
DARK_TEXT = "#212121"

PAGE_TITLES: dict[Page, str] = {
    Page.FITNESS: "Fitness Tracker",
    Page.MEAL_PLANNER: "Meal Planner",
    Page.HYDRATION: "Hydration Tracker",
    Page.MENTAL_WELLNESS: "Mental Wellness",
}

MOOD_CHOICES: tuple[MoodToken, ...] = (MoodToken.HAPPY, MoodToken.SAD, MoodToken.ANGRY)


def run_app(config: AppConfig | None = None) -> int:
    """Lanza la app Kivy."""
    from kivy.app import App
    from kivy.core.window import Window
    from kivy.graphics import Color, Rectangle
    from kivy.metrics import dp, sp
    from kivy.uix.boxlayout import BoxLayout
    from kivy.uix.button import Button
    from kivy.uix.label import Label
    from kivy.uix.progressbar import ProgressBar
    from kivy.uix.textinput import TextInput
    from kivy.uix.widget import Widget

    app_config = config or AppConfig()

    def paint(widget: Widget, hex_color: str) -> None:
        with widget.canvas.before:
            Color(*_rgba(hex_color))
            rect = Rectangle(pos=widget.pos, size=widget.size)
        widget.bind(
            pos=lambda inst, value: setattr(rect, "pos", value),
            size=lambda inst, value: setattr(rect, "size", value),
        )

    def heading(text: str) -> Label:
        return Label(
            text=text,
            font_size=sp(26),
            bold=True,
            color=_rgba(DARK_TEXT),
            size_hint_y=None,
            height=dp(48),
        )

    class WellnessTrackerApp(App):
        """Main Kivy app."""

        def __init__(self, **kwargs: object) -> None:
            super().__init__(**kwargs)
            self.title = app_config.title
            self.navigator = Navigator()
            self.content: BoxLayout | None = None
            self.status: Label | None = None
            self._unsubscribe_tracker: Callable[[], None] | None = None

        def build(self) -> BoxLayout:
            Window.bind(on_key_down=self._on_key_down)
            Window.clearcolor = _rgba(BACKGROUND)
            if app_config.fullscreen:
                Window.fullscreen = "auto"

            root = BoxLayout(orientation="vertical")
            top_bar = Label(
                text=app_config.title,
                font_size=sp(20),
                color=(1, 1, 1, 1),
                size_hint_y=None,
                height=dp(56),
            )
            paint(top_bar, PRIMARY)
            root.add_widget(top_bar)

            self.content = BoxLayout(
                orientation="vertical",
                spacing=dp(16),
                padding=dp(16),
            )
            root.add_widget(self.content)

            self.status = Label(
                text="",
                color=_rgba(ERROR_TEXT),
                size_hint_y=None,
                height=dp(24),
            )
            root.add_widget(self.status)

            self.navigator.subscribe(lambda _nav: self._show_page())
            self._show_page()
            return root

        def _on_key_down(
            self,
            _window: object,
            keycode: int,
            _scancode: int,
            _text: str,
            _modifiers: list[str],
        ) -> bool:
            # Esc: salir de fullscreen o cerrar app.
            if keycode != 27:
                return False
            if Window.fullscreen:
                Window.fullscreen = False
            else:
                self.stop()
            return True

        def _navigate(self, page: Page) -> None:
            try:
                self.navigator.go_to(page)
            except Exception as exc:
                self._show_error("navegar", exc)

        def _dispatch(self, store: Store[Any], action: object) -> None:
            try:
                store.dispatch(action)
            except Exception as exc:
                self._show_error("actualizar", exc)

        def _show_page(self) -> None:
            if self.content is None:
                return
            if self._unsubscribe_tracker is not None:
                self._unsubscribe_tracker()
                self._unsubscribe_tracker = None
            if self.status is not None:
                self.status.text = ""
            self.content.clear_widgets()

            page = self.navigator.current_page
            store = self.navigator.tracker
            if store is None:
                self._build_home(self.content)
                return

            self.content.add_widget(heading(PAGE_TITLES[page]))
            builders: dict[Page, Callable[..., Callable[[Any], None]]] = {
                Page.FITNESS: self._build_fitness,
                Page.MEAL_PLANNER: self._build_meal_planner,
                Page.HYDRATION: self._build_hydration,
                Page.MENTAL_WELLNESS: self._build_mental_wellness,
            }
            render = builders[page](self.content, store)
            self._unsubscribe_tracker = store.subscribe(render)
            render(store.state)

            back_btn = Button(
                text="Go Back",
                size_hint=(None, None),
                size=(dp(160), dp(48)),
            )
            back_btn.bind(on_press=lambda *_args: self.navigator.go_home())
            self.content.add_widget(back_btn)

        def _build_home(self, container: BoxLayout) -> None:
            for card in HOME_CARDS:
                btn = Button(
                    text=f"[b]{card.title}[/b]\n[size=14sp]{card.description}[/size]",
                    markup=True,
                    halign="left",
                    font_size=sp(18),
                    color=_rgba(DARK_TEXT),
                    background_normal="",
                    background_color=_rgba(CARD_BACKGROUND),
                )
                btn.bind(size=lambda inst, value: setattr(inst, "text_size", value))
                btn.bind(
                    on_press=lambda _btn, page=card.page: self._navigate(page)
                )
                container.add_widget(btn)

        def _build_fitness(
            self, container: BoxLayout, store: Store[Any]
        ) -> Callable[[Any], None]:
            steps_input = TextInput(
                hint_text="Enter Steps",
                multiline=False,
                input_type="number",
                size_hint_y=None,
                height=dp(44),
            )
            error_label = Label(
                text="",
                color=_rgba(ERROR_TEXT),
                font_size=sp(12),
                size_hint_y=None,
                height=dp(20),
            )
            progress = ProgressBar(max=100, size_hint_y=None, height=dp(24))
            syncing = False

            def on_text(_inst: TextInput, value: str) -> None:
                if not syncing:
                    self._dispatch(store, SetStepsInput(value))

            def render(state: FitnessState) -> None:
                nonlocal syncing
                restored = _text_to_restore(steps_input.text, state)
                if restored is not None:
                    syncing = True
                    steps_input.text = restored
                    syncing = False
                error_label.text = INVALID_STEPS_MESSAGE if state.invalid else ""
                progress.value = _display_progress(state) * progress.max

            steps_input.bind(text=on_text)
            container.add_widget(steps_input)
            container.add_widget(error_label)
            container.add_widget(progress)
            return render

        def _build_meal_planner(
            self, container: BoxLayout, store: Store[Any]
        ) -> Callable[[Any], None]:
            meals_box = BoxLayout(orientation="vertical", spacing=dp(8))
            container.add_widget(meals_box)

            def render(state: MealPlannerState) -> None:
                meals_box.clear_widgets()
                for meal in state.meals:
                    meals_box.add_widget(
                        Label(text=meal, font_size=sp(18), color=_rgba(MUTED_TEXT))
                    )

            return render

        def _build_hydration(
            self, container: BoxLayout, store: Store[Any]
        ) -> Callable[[Any], None]:
            count_label = Label(
                text="",
                font_size=sp(18),
                color=_rgba(DARK_TEXT),
                size_hint_y=None,
                height=dp(32),
            )
            buttons = BoxLayout(
                orientation="horizontal",
                spacing=dp(16),
                size_hint_y=None,
                height=dp(48),
            )
            add_btn = Button(text="Add Glass")
            remove_btn = Button(text="Remove Glass")
            add_btn.bind(
                on_press=lambda *_args: self._dispatch(store, IncrementGlasses())
            )
            remove_btn.bind(
                on_press=lambda *_args: self._dispatch(store, DecrementGlasses())
            )
            buttons.add_widget(add_btn)
            buttons.add_widget(remove_btn)
            container.add_widget(count_label)
            container.add_widget(buttons)

            def render(state: HydrationState) -> None:
                count_label.text = _glasses_text(state)

            return render

        def _build_mental_wellness(
            self, container: BoxLayout, store: Store[Any]
        ) -> Callable[[Any], None]:
            mood_label = Label(
                text="",
                font_size=sp(20),
                color=_rgba(DARK_TEXT),
                size_hint_y=None,
                height=dp(36),
            )
            buttons = BoxLayout(
                orientation="horizontal",
                spacing=dp(16),
                size_hint_y=None,
                height=dp(48),
            )
            for mood in MOOD_CHOICES:
                btn = Button(text=mood.label)
                btn.bind(
                    on_press=lambda _btn, mood=mood: self._dispatch(
                        store, SetMood(mood)
                    )
                )
                buttons.add_widget(btn)
            container.add_widget(mood_label)
            container.add_widget(buttons)

            def render(state: MentalWellnessState) -> None:
                mood_label.text = _mood_text(state)

            return render

        def _show_error(self, action: str, exc: Exception) -> None:
            error_type = type(exc).__name__
            log.error("Error al %s:\n%s", action, traceback.format_exc())
            if self.status is not None:
                self.status.text = f"Error al {action} ({error_type}): {exc}"

    WellnessTrackerApp().run()
    return 0


def _rgba(hex_color: str, alpha: float = 1.0) -> tuple[float, float, float, float]:
    """Convert ``#RRGGBB`` to a Kivy RGBA tuple."""
    value = hex_color.lstrip("#")
    if len(value) != 6:
        raise ValueError(f"Expected #RRGGBB color, got {hex_color!r}")
    red, green, blue = (int(value[i : i + 2], 16) / 255 for i in (0, 2, 4))
    return (red, green, blue, alpha)


def _display_progress(state: FitnessState) -> float:
    """Progress fraction clamped to [0, 1] for the progress bar."""
    return min(max(progress_fraction(state), 0.0), 1.0)


def _text_to_restore(current: str, state: FitnessState) -> str | None:
    """Text to put back in the steps field, or None when it already matches.

    A rejected edit leaves the widget showing the bad text while the state
    keeps the last accepted value.
    """
    if current == state.steps_input:
        return None
    return state.steps_input


def _glasses_text(state: HydrationState) -> str:
    return f"Glasses of water: {state.glasses}"


def _mood_text(state: MentalWellnessState) -> str:
    return f"Current Mood: {state.mood.value} ({state.mood.label})"
