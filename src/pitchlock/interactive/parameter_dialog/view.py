# どこで: `src/pitchlock/interactive/parameter_dialog/view.py`。
# 何を: コントローラ状態から、ダイアログ描画用の行モデル（表示文字列/スライダー位置）を作る。
# なぜ: 描画（imgui）と状態を分離し、表示内容を UI 無しでテストできるようにするため。

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from pitchlock.core.parameters.bounds import (
    MAXIMUM_PLAYBACK_VALUE,
    MINIMUM_PLAYBACK_VALUE,
    STEP_SIZES,
)
from pitchlock.core.parameters.controller import DualParameterController
from pitchlock.core.parameters.coupling import ParameterName
from pitchlock.core.parameters.formatting import (
    format_percent,
    format_pitch,
    format_speed,
    format_step_down,
    format_step_up,
)


@dataclass(frozen=True, slots=True)
class SliderRow:
    """1 本のスライダー行（ラベル/位置/表示文字列/ステップボタン文字列）。"""

    parameter: ParameterName
    label: str
    position: int
    granularity: int
    current_text: str
    minimum_text: str
    maximum_text: str
    step_down_text: str
    step_up_text: str


@dataclass(frozen=True, slots=True)
class DialogView:
    """ダイアログ 1 フレーム分の表示内容。"""

    tempo: SliderRow
    pitch: SliderRow
    coupled: bool
    skip_silence: bool
    step_size: float
    step_choices: tuple[tuple[float, str], ...]


def _slider_row(
    controller: DualParameterController,
    *,
    parameter: ParameterName,
    label: str,
    value: float,
    position: int,
    fmt: Callable[[float], str],
) -> SliderRow:
    step = controller.step_size
    return SliderRow(
        parameter=parameter,
        label=label,
        position=int(position),
        granularity=int(controller.strategy.granularity),
        current_text=fmt(value),
        minimum_text=fmt(MINIMUM_PLAYBACK_VALUE),
        maximum_text=fmt(MAXIMUM_PLAYBACK_VALUE),
        step_down_text=format_step_down(step),
        step_up_text=format_step_up(step),
    )


def dialog_view(controller: DualParameterController) -> DialogView:
    """controller の現在状態から DialogView を作って返す。"""

    return DialogView(
        tempo=_slider_row(
            controller,
            parameter="tempo",
            label="Tempo",
            value=controller.tempo,
            position=controller.tempo_position,
            fmt=format_speed,
        ),
        pitch=_slider_row(
            controller,
            parameter="pitch",
            label="Pitch",
            value=controller.pitch,
            position=controller.pitch_position,
            fmt=format_pitch,
        ),
        coupled=controller.coupled,
        skip_silence=controller.skip_silence,
        step_size=controller.step_size,
        step_choices=tuple((size, format_percent(size)) for size in STEP_SIZES),
    )


__all__ = ["DialogView", "SliderRow", "dialog_view"]
