"""interactive.parameter_dialog.view をテスト。"""

from __future__ import annotations

from pitchlock.core.parameters import DualParameterController
from pitchlock.interactive.parameter_dialog.view import dialog_view


def test_default_view_texts() -> None:
    view = dialog_view(DualParameterController())

    assert view.tempo.label == "Tempo"
    assert view.tempo.current_text == "1x"
    assert view.tempo.minimum_text == "0.1x"
    assert view.tempo.maximum_text == "3x"
    assert view.tempo.position == 5000
    assert view.tempo.granularity == 10000

    assert view.pitch.label == "Pitch"
    assert view.pitch.current_text == "100%"
    assert view.pitch.minimum_text == "10%"
    assert view.pitch.maximum_text == "300%"
    assert view.pitch.position == 5000

    assert view.tempo.step_down_text == "-5%"
    assert view.tempo.step_up_text == "+5%"
    assert view.coupled is True
    assert view.skip_silence is False


def test_step_choices_and_selected_size() -> None:
    controller = DualParameterController()
    controller.set_step_size(0.25)

    view = dialog_view(controller)

    assert [label for _size, label in view.step_choices] == ["1%", "5%", "10%", "25%", "100%"]
    assert view.step_size == 0.25
    assert view.pitch.step_up_text == "+25%"
    assert view.pitch.step_down_text == "-25%"


def test_view_follows_controller_state() -> None:
    controller = DualParameterController(1.25, 1.2, True)

    view = dialog_view(controller)

    assert view.coupled is False
    assert view.skip_silence is True
    assert view.tempo.current_text == "1.25x"
    assert view.pitch.current_text == "120%"
    assert view.tempo.position == controller.tempo_position
    assert view.pitch.position == controller.pitch_position
