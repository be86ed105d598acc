# どこで: `src/pitchlock/__init__.py`。
# 何を: ルート `pitchlock` パッケージを定義する。
# なぜ: import 起点を `pitchlock` に統一するため。

from __future__ import annotations

from pitchlock.api import run_parameter_dialog
from pitchlock.core.parameters import (
    DualParameterController,
    ParameterState,
    QuadraticSliderStrategy,
    dispatch_event,
    playback_slider_strategy,
)

__all__ = [
    "DualParameterController",
    "ParameterState",
    "QuadraticSliderStrategy",
    "dispatch_event",
    "playback_slider_strategy",
    "run_parameter_dialog",
]
