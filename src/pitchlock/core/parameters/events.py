# どこで: `src/pitchlock/core/parameters/events.py`。
# 何を: ホスト（ダイアログ）から届く入力イベントと、その振り分け（dispatch_event）を提供する。
# なぜ: ウィジェット固有のコールバック型に依存せず、コントローラを同期呼び出しだけで駆動するため。

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .controller import DualParameterController, FinalizeKind
from .coupling import ParameterName


@dataclass(frozen=True, slots=True)
class SliderMoved:
    """スライダーが position へ動いた。from_user=False はプログラム由来の反映。"""

    control: ParameterName
    position: int
    from_user: bool = True


@dataclass(frozen=True, slots=True)
class StepPressed:
    """ステップボタン（direction=+1/-1）が押された。"""

    parameter: ParameterName
    direction: int


@dataclass(frozen=True, slots=True)
class CouplingToggled:
    coupled: bool


@dataclass(frozen=True, slots=True)
class SkipSilenceToggled:
    skip_silence: bool


@dataclass(frozen=True, slots=True)
class StepSizeSelected:
    step_size: float


@dataclass(frozen=True, slots=True)
class DialogFinalized:
    kind: FinalizeKind


ControlEvent = Union[
    SliderMoved,
    StepPressed,
    CouplingToggled,
    SkipSilenceToggled,
    StepSizeSelected,
    DialogFinalized,
]


def dispatch_event(controller: DualParameterController, event: ControlEvent) -> None:
    """event を対応するコントローラ操作へ振り分ける。"""

    if isinstance(event, SliderMoved):
        controller.slider_moved(event.control, event.position, from_user=event.from_user)
    elif isinstance(event, StepPressed):
        if event.parameter == "tempo":
            controller.step_tempo(event.direction)
        elif event.parameter == "pitch":
            controller.step_pitch(event.direction)
        else:
            raise ValueError(f"unknown parameter: {event.parameter!r}")
    elif isinstance(event, CouplingToggled):
        controller.set_coupled(event.coupled)
    elif isinstance(event, SkipSilenceToggled):
        controller.set_skip_silence(event.skip_silence)
    elif isinstance(event, StepSizeSelected):
        controller.set_step_size(event.step_size)
    elif isinstance(event, DialogFinalized):
        controller.finalize(event.kind)
    else:
        raise TypeError(f"unsupported event: {event!r}")


def dispatch_events(
    controller: DualParameterController, events: list[ControlEvent]
) -> None:
    """events を順に dispatch する（1 イベントずつ完結させる）。"""

    for event in events:
        dispatch_event(controller, event)


__all__ = [
    "ControlEvent",
    "CouplingToggled",
    "DialogFinalized",
    "SkipSilenceToggled",
    "SliderMoved",
    "StepPressed",
    "StepSizeSelected",
    "dispatch_event",
    "dispatch_events",
]
