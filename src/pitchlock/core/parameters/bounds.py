# どこで: `src/pitchlock/core/parameters/bounds.py`。
# 何を: tempo/pitch の値域・ピボット・スライダー分解能・ステップ幅の定数を提供する。
# なぜ: ホスト側（スライダー/セレクタ生成）とコアで同じ列挙値を参照させるため。

from __future__ import annotations

import math

MINIMUM_PLAYBACK_VALUE = 0.10
MAXIMUM_PLAYBACK_VALUE = 3.00
PIVOT_PLAYBACK_VALUE = 1.00
SLIDER_GRANULARITY = 10000

DEFAULT_TEMPO = 1.00
DEFAULT_PITCH = 1.00
DEFAULT_SKIP_SILENCE = False

STEP_SIZES: tuple[float, ...] = (0.01, 0.05, 0.10, 0.25, 1.00)
DEFAULT_STEP_SIZE = 0.05

STEP_UP = 1
STEP_DOWN = -1


def clamp_playback_value(value: float) -> float:
    """value を [MINIMUM_PLAYBACK_VALUE, MAXIMUM_PLAYBACK_VALUE] に丸めて返す。

    NaN は既定値（1.00）として扱う。
    """

    v = float(value)
    if math.isnan(v):
        return float(PIVOT_PLAYBACK_VALUE)
    return max(MINIMUM_PLAYBACK_VALUE, min(MAXIMUM_PLAYBACK_VALUE, v))


def canonical_step_size(size: float) -> float | None:
    """size に一致する列挙ステップ幅を返す。列挙外なら None。

    float の表現誤差（例: 0.1 と 0.10000000149 の float32 由来値）は吸収する。
    """

    try:
        s = float(size)
    except (TypeError, ValueError):
        return None
    for candidate in STEP_SIZES:
        if math.isclose(s, candidate, rel_tol=0.0, abs_tol=1e-6):
            return candidate
    return None


__all__ = [
    "MINIMUM_PLAYBACK_VALUE",
    "MAXIMUM_PLAYBACK_VALUE",
    "PIVOT_PLAYBACK_VALUE",
    "SLIDER_GRANULARITY",
    "DEFAULT_TEMPO",
    "DEFAULT_PITCH",
    "DEFAULT_SKIP_SILENCE",
    "STEP_SIZES",
    "DEFAULT_STEP_SIZE",
    "STEP_UP",
    "STEP_DOWN",
    "clamp_playback_value",
    "canonical_step_size",
]
