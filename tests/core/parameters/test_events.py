"""core.parameters.events をテスト。"""

from __future__ import annotations

import pytest

from pitchlock.core.parameters import (
    CouplingToggled,
    DialogFinalized,
    DualParameterController,
    SkipSilenceToggled,
    SliderMoved,
    StepPressed,
    StepSizeSelected,
    dispatch_event,
)
from pitchlock.core.parameters.events import dispatch_events


def _controller(
    tempo: float = 1.0, pitch: float = 1.0
) -> tuple[DualParameterController, list[tuple[float, float, bool]]]:
    calls: list[tuple[float, float, bool]] = []
    controller = DualParameterController(
        tempo, pitch, False, listener=lambda t, p, s: calls.append((t, p, s))
    )
    return controller, calls


def test_slider_moved_updates_value() -> None:
    controller, calls = _controller(1.2, 0.8)

    dispatch_event(controller, SliderMoved(control="tempo", position=10000))

    assert controller.tempo == 3.0
    assert controller.pitch == 0.8
    assert calls == [(3.0, 0.8, False)]


def test_programmatic_slider_event_is_ignored() -> None:
    controller, calls = _controller()

    dispatch_event(controller, SliderMoved(control="tempo", position=0, from_user=False))

    assert controller.tempo == 1.0
    assert calls == []


def test_step_pressed_routes_to_parameter() -> None:
    controller, calls = _controller(1.2, 0.8)

    dispatch_event(controller, StepPressed(parameter="pitch", direction=-1))

    assert controller.pitch == pytest.approx(0.75)
    assert controller.tempo == 1.2
    assert len(calls) == 1


def test_step_pressed_with_unknown_parameter_raises() -> None:
    controller, calls = _controller()

    with pytest.raises(ValueError):
        dispatch_event(controller, StepPressed(parameter="volume", direction=1))  # type: ignore[arg-type]
    assert calls == []


def test_toggles_and_step_size() -> None:
    controller, calls = _controller(1.2, 0.8)

    dispatch_events(
        controller,
        [
            StepSizeSelected(step_size=1.0),
            SkipSilenceToggled(skip_silence=True),
            CouplingToggled(coupled=True),
        ],
    )

    assert controller.step_size == 1.0
    assert controller.skip_silence is True
    assert controller.coupled is True
    assert calls == [(1.2, 0.8, True), (0.8, 0.8, True)]


def test_dialog_finalized_routes_to_finalize() -> None:
    controller, calls = _controller(2.0, 2.0)
    controller.update_tempo(1.0)
    calls.clear()

    dispatch_event(controller, DialogFinalized(kind="cancel"))

    assert controller.finalized == "cancel"
    assert calls == [(2.0, 2.0, False)]


def test_unsupported_event_raises_type_error() -> None:
    controller, _ = _controller()

    with pytest.raises(TypeError):
        dispatch_event(controller, object())  # type: ignore[arg-type]


def test_each_event_notifies_at_most_once() -> None:
    controller, calls = _controller()

    events = [
        SliderMoved(control="tempo", position=6000),
        StepPressed(parameter="pitch", direction=1),
        CouplingToggled(coupled=False),
        StepPressed(parameter="tempo", direction=-1),
        StepSizeSelected(step_size=0.01),
    ]
    for event in events:
        before = len(calls)
        dispatch_event(controller, event)
        assert len(calls) - before <= 1

    assert len(calls) == 3
