# どこで: `src/pitchlock/core/parameters/__init__.py`。
# 何を: tempo/pitch コントロールの公開エイリアスをまとめる。
# なぜ: API 層/ホスト側から最小インポートで使えるようにするため。

from .bounds import (
    DEFAULT_PITCH,
    DEFAULT_SKIP_SILENCE,
    DEFAULT_STEP_SIZE,
    DEFAULT_TEMPO,
    MAXIMUM_PLAYBACK_VALUE,
    MINIMUM_PLAYBACK_VALUE,
    PIVOT_PLAYBACK_VALUE,
    SLIDER_GRANULARITY,
    STEP_DOWN,
    STEP_SIZES,
    STEP_UP,
)
from .controller import DualParameterController, ParametersChangedListener
from .events import (
    ControlEvent,
    CouplingToggled,
    DialogFinalized,
    SkipSilenceToggled,
    SliderMoved,
    StepPressed,
    StepSizeSelected,
    dispatch_event,
)
from .slider_strategy import QuadraticSliderStrategy, SliderStrategy, playback_slider_strategy
from .state import ParameterState

__all__ = [
    "DEFAULT_PITCH",
    "DEFAULT_SKIP_SILENCE",
    "DEFAULT_STEP_SIZE",
    "DEFAULT_TEMPO",
    "MAXIMUM_PLAYBACK_VALUE",
    "MINIMUM_PLAYBACK_VALUE",
    "PIVOT_PLAYBACK_VALUE",
    "SLIDER_GRANULARITY",
    "STEP_DOWN",
    "STEP_SIZES",
    "STEP_UP",
    "DualParameterController",
    "ParametersChangedListener",
    "ControlEvent",
    "CouplingToggled",
    "DialogFinalized",
    "SkipSilenceToggled",
    "SliderMoved",
    "StepPressed",
    "StepSizeSelected",
    "dispatch_event",
    "QuadraticSliderStrategy",
    "SliderStrategy",
    "playback_slider_strategy",
    "ParameterState",
]
