# どこで: `src/pitchlock/interactive/parameter_dialog/widgets.py`。
# 何を: DialogView を pyimgui のウィジェットへ描画し、ユーザー操作を ControlEvent として返す。
# なぜ: 描画関数は状態を書き換えず、反映はコントローラ（dispatch_event）へ一本化するため。

from __future__ import annotations

from pitchlock.core.parameters.bounds import STEP_DOWN, STEP_UP
from pitchlock.core.parameters.events import (
    ControlEvent,
    CouplingToggled,
    DialogFinalized,
    SkipSilenceToggled,
    SliderMoved,
    StepPressed,
    StepSizeSelected,
)

from .view import DialogView, SliderRow

COUPLING_LABEL = "Couple tempo and pitch"
SKIP_SILENCE_LABEL = "Skip silence"


def _imgui_format_text(text: str) -> str:
    # slider の format は printf 書式なので % をエスケープする。
    return str(text).replace("%", "%%")


def widget_parameter_slider(row: SliderRow) -> list[ControlEvent]:
    """1 本のスライダー行（min/max 表示 + スライダー + ステップボタン）を描画する。"""

    import imgui  # type: ignore[import-untyped]

    events: list[ControlEvent] = []
    key = row.parameter

    imgui.text(row.label)

    if imgui.button(f"{row.step_down_text}##{key}_step_down"):
        events.append(StepPressed(parameter=key, direction=STEP_DOWN))
    imgui.same_line()

    imgui.text(row.minimum_text)
    imgui.same_line()

    changed, position = imgui.slider_int(
        f"##{key}_slider",
        int(row.position),
        0,
        int(row.granularity),
        format=_imgui_format_text(row.current_text),
    )
    if changed and int(position) != int(row.position):
        events.append(SliderMoved(control=key, position=int(position), from_user=True))
    imgui.same_line()

    imgui.text(row.maximum_text)
    imgui.same_line()

    if imgui.button(f"{row.step_up_text}##{key}_step_up"):
        events.append(StepPressed(parameter=key, direction=STEP_UP))

    return events


def widget_step_size_selector(view: DialogView) -> list[ControlEvent]:
    """ステップ幅セレクタ（ラジオボタン列）を描画する。"""

    import imgui  # type: ignore[import-untyped]

    events: list[ControlEvent] = []
    imgui.text("Step size")
    for i, (size, label) in enumerate(view.step_choices):
        if i > 0:
            imgui.same_line()
        if imgui.radio_button(f"{label}##step_size_{i}", size == view.step_size):
            if size != view.step_size:
                events.append(StepSizeSelected(step_size=size))
    return events


def widget_toggles(view: DialogView) -> list[ControlEvent]:
    """coupling / skip silence のチェックボックスを描画する。"""

    import imgui  # type: ignore[import-untyped]

    events: list[ControlEvent] = []
    clicked, coupled = imgui.checkbox(COUPLING_LABEL, bool(view.coupled))
    if clicked and bool(coupled) != bool(view.coupled):
        events.append(CouplingToggled(coupled=bool(coupled)))

    clicked, skip = imgui.checkbox(SKIP_SILENCE_LABEL, bool(view.skip_silence))
    if clicked and bool(skip) != bool(view.skip_silence):
        events.append(SkipSilenceToggled(skip_silence=bool(skip)))
    return events


def widget_finalize_buttons() -> list[ControlEvent]:
    """Cancel / Reset / Finish ボタンを描画する。"""

    import imgui  # type: ignore[import-untyped]

    events: list[ControlEvent] = []
    if imgui.button("Cancel"):
        events.append(DialogFinalized(kind="cancel"))
    imgui.same_line()
    if imgui.button("Reset"):
        events.append(DialogFinalized(kind="reset"))
    imgui.same_line()
    if imgui.button("Finish"):
        events.append(DialogFinalized(kind="commit"))
    return events


def render_dialog_controls(view: DialogView) -> list[ControlEvent]:
    """ダイアログ本体を描画し、このフレームで発生したイベントを描画順に返す。"""

    import imgui  # type: ignore[import-untyped]

    events: list[ControlEvent] = []
    events.extend(widget_parameter_slider(view.tempo))
    imgui.separator()
    events.extend(widget_parameter_slider(view.pitch))
    imgui.separator()
    events.extend(widget_step_size_selector(view))
    imgui.separator()
    events.extend(widget_toggles(view))
    imgui.separator()
    events.extend(widget_finalize_buttons())
    return events


__all__ = [
    "COUPLING_LABEL",
    "SKIP_SILENCE_LABEL",
    "render_dialog_controls",
    "widget_finalize_buttons",
    "widget_parameter_slider",
    "widget_step_size_selector",
    "widget_toggles",
]
