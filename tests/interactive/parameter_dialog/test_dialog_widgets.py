"""interactive.parameter_dialog.widgets をテスト（imgui はダミーに差し替える）。"""

from __future__ import annotations

import sys
import types
from typing import Any

import pytest

from pitchlock.core.parameters import (
    CouplingToggled,
    DialogFinalized,
    DualParameterController,
    SkipSilenceToggled,
    SliderMoved,
    StepPressed,
    StepSizeSelected,
)
from pitchlock.core.parameters.events import dispatch_events
from pitchlock.interactive.parameter_dialog.view import dialog_view
from pitchlock.interactive.parameter_dialog.widgets import (
    COUPLING_LABEL,
    SKIP_SILENCE_LABEL,
    render_dialog_controls,
    widget_parameter_slider,
)


class FakeImgui:
    """押下/変更を label 単位で指定できる imgui のダミー。"""

    def __init__(self) -> None:
        self.pressed: set[str] = set()
        self.slider_values: dict[str, int] = {}
        self.checkbox_values: dict[str, bool] = {}
        self.calls: list[tuple[str, Any]] = []

    def text(self, value: str) -> None:
        self.calls.append(("text", value))

    def same_line(self) -> None:
        pass

    def separator(self) -> None:
        self.calls.append(("separator", None))

    def button(self, label: str) -> bool:
        self.calls.append(("button", label))
        return label in self.pressed

    def radio_button(self, label: str, active: bool) -> bool:
        self.calls.append(("radio_button", label))
        return label in self.pressed

    def slider_int(self, label: str, value: int, v_min: int, v_max: int, format: str = "%d"):
        self.calls.append(("slider_int", (label, value, v_min, v_max, format)))
        if label in self.slider_values:
            return True, self.slider_values[label]
        return False, value

    def checkbox(self, label: str, state: bool):
        self.calls.append(("checkbox", label))
        if label in self.checkbox_values:
            return True, self.checkbox_values[label]
        return False, state


@pytest.fixture
def fake_imgui(monkeypatch: pytest.MonkeyPatch) -> FakeImgui:
    fake = FakeImgui()
    module = types.ModuleType("imgui")
    for name in (
        "text",
        "same_line",
        "separator",
        "button",
        "radio_button",
        "slider_int",
        "checkbox",
    ):
        setattr(module, name, getattr(fake, name))
    monkeypatch.setitem(sys.modules, "imgui", module)
    return fake


def test_nothing_pressed_yields_no_events(fake_imgui: FakeImgui) -> None:
    view = dialog_view(DualParameterController())

    assert render_dialog_controls(view) == []

    labels = [value for kind, value in fake_imgui.calls if kind == "button"]
    assert labels == [
        "-5%##tempo_step_down",
        "+5%##tempo_step_up",
        "-5%##pitch_step_down",
        "+5%##pitch_step_up",
        "Cancel",
        "Reset",
        "Finish",
    ]
    radios = [value for kind, value in fake_imgui.calls if kind == "radio_button"]
    assert radios[3] == "25%##step_size_3"
    checkboxes = [value for kind, value in fake_imgui.calls if kind == "checkbox"]
    assert checkboxes == [COUPLING_LABEL, SKIP_SILENCE_LABEL]


def test_slider_format_escapes_percent(fake_imgui: FakeImgui) -> None:
    view = dialog_view(DualParameterController(1.0, 1.2, False))

    widget_parameter_slider(view.pitch)

    sliders = [value for kind, value in fake_imgui.calls if kind == "slider_int"]
    assert sliders == [("##pitch_slider", view.pitch.position, 0, 10000, "120%%")]


def test_slider_change_emits_slider_moved(fake_imgui: FakeImgui) -> None:
    fake_imgui.slider_values["##tempo_slider"] = 7500
    view = dialog_view(DualParameterController())

    events = widget_parameter_slider(view.tempo)

    assert events == [SliderMoved(control="tempo", position=7500, from_user=True)]


def test_slider_at_same_position_emits_nothing(fake_imgui: FakeImgui) -> None:
    fake_imgui.slider_values["##tempo_slider"] = 5000
    view = dialog_view(DualParameterController())

    assert widget_parameter_slider(view.tempo) == []


def test_controls_emit_events_in_draw_order(fake_imgui: FakeImgui) -> None:
    fake_imgui.pressed.update(
        {"+5%##tempo_step_up", "-5%##pitch_step_down", "25%##step_size_3", "Finish"}
    )
    fake_imgui.checkbox_values[COUPLING_LABEL] = False
    fake_imgui.checkbox_values[SKIP_SILENCE_LABEL] = True
    view = dialog_view(DualParameterController())

    events = render_dialog_controls(view)

    assert events == [
        StepPressed(parameter="tempo", direction=1),
        StepPressed(parameter="pitch", direction=-1),
        StepSizeSelected(step_size=0.25),
        CouplingToggled(coupled=False),
        SkipSilenceToggled(skip_silence=True),
        DialogFinalized(kind="commit"),
    ]


def test_selecting_current_step_size_emits_nothing(fake_imgui: FakeImgui) -> None:
    fake_imgui.pressed.add("5%##step_size_1")
    view = dialog_view(DualParameterController())

    assert render_dialog_controls(view) == []


def test_rendered_events_drive_controller(fake_imgui: FakeImgui) -> None:
    calls: list[tuple[float, float, bool]] = []
    controller = DualParameterController(
        listener=lambda t, p, s: calls.append((t, p, s))
    )
    fake_imgui.pressed.update({"+5%##tempo_step_up", "Cancel"})

    dispatch_events(controller, render_dialog_controls(dialog_view(controller)))

    assert controller.finalized == "cancel"
    assert controller.tempo == pytest.approx(1.05)
    assert controller.pitch == pytest.approx(1.05)
    assert calls[-1] == (1.0, 1.0, False)
    assert len(calls) == 2
