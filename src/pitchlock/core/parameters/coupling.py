# どこで: `src/pitchlock/core/parameters/coupling.py`。
# 何を: tempo/pitch の連動（coupling）ポリシーを純粋関数として提供する。
# なぜ: スライダー同士が互いを直接書き換える再入ループを避け、1 イベント 1 回の評価で最終状態を決めるため。

from __future__ import annotations

from dataclasses import replace
from typing import Literal

from .bounds import clamp_playback_value
from .state import ParameterState

ParameterName = Literal["tempo", "pitch"]
PARAMETER_NAMES: tuple[ParameterName, ...] = ("tempo", "pitch")


def apply_value_update(
    state: ParameterState, parameter: ParameterName, raw_value: float
) -> ParameterState:
    """parameter を raw_value（クランプ後）へ更新した新しい状態を返す。

    coupled のときは触れていない側も同じ値にする。
    """

    if parameter not in PARAMETER_NAMES:
        raise ValueError(f"unknown parameter: {parameter!r}")

    value = clamp_playback_value(raw_value)
    if state.coupled:
        return replace(state, tempo=value, pitch=value)
    if parameter == "tempo":
        return replace(state, tempo=value)
    return replace(state, pitch=value)


def apply_coupling(state: ParameterState, coupled: bool) -> ParameterState:
    """coupling フラグを切り替えた新しい状態を返す。

    - True -> False: 値は変えない（連動中は既に同値）。
    - False -> True: tempo/pitch を小さい方に揃える。
    """

    coupled = bool(coupled)
    if coupled == state.coupled:
        return state
    if not coupled:
        return replace(state, coupled=False)

    minimum = min(float(state.tempo), float(state.pitch))
    return replace(state, coupled=True, tempo=minimum, pitch=minimum)


def current_value(state: ParameterState, parameter: ParameterName) -> float:
    """parameter の現在値を返す。"""

    if parameter == "tempo":
        return float(state.tempo)
    if parameter == "pitch":
        return float(state.pitch)
    raise ValueError(f"unknown parameter: {parameter!r}")


__all__ = [
    "PARAMETER_NAMES",
    "ParameterName",
    "apply_coupling",
    "apply_value_update",
    "current_value",
]
