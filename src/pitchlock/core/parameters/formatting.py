# どこで: `src/pitchlock/core/parameters/formatting.py`。
# 何を: tempo/pitch/ステップ幅の表示用文字列を作る。
# なぜ: ダイアログ/ログなど複数の表示経路で同じ書式を共有するため。

from __future__ import annotations

STEP_UP_SIGN = "+"
STEP_DOWN_SIGN = "-"


def format_speed(value: float) -> str:
    """速度を `1.25x` 形式で返す（小数 2 桁まで、末尾 0 は省略）。"""

    text = f"{float(value):.2f}".rstrip("0").rstrip(".")
    return f"{text}x"


def format_pitch(value: float) -> str:
    """ピッチを `100%` 形式で返す。"""

    return f"{int(round(float(value) * 100.0))}%"


def format_percent(step_size: float) -> str:
    """ステップ幅を `5%` 形式で返す。"""

    return format_pitch(step_size)


def format_step_up(step_size: float) -> str:
    return STEP_UP_SIGN + format_percent(step_size)


def format_step_down(step_size: float) -> str:
    return STEP_DOWN_SIGN + format_percent(step_size)


__all__ = [
    "STEP_DOWN_SIGN",
    "STEP_UP_SIGN",
    "format_percent",
    "format_pitch",
    "format_speed",
    "format_step_down",
    "format_step_up",
]
