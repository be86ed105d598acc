# どこで: `src/pitchlock/core/parameters/slider_strategy.py`。
# 何を: 連続値 <-> 整数スライダー位置の相互変換（ピボット周りを高分解能にする二次写像）を提供する。
# なぜ: 既定値付近を細かく、両端を粗く操作できるスライダーを UI 非依存に実装するため。

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Protocol

import numpy as np

from .bounds import (
    MAXIMUM_PLAYBACK_VALUE,
    MINIMUM_PLAYBACK_VALUE,
    PIVOT_PLAYBACK_VALUE,
    SLIDER_GRANULARITY,
)


class SliderStrategy(Protocol):
    """値とスライダー位置の相互変換を表すプロトコル。"""

    granularity: int

    def position_of(self, value: float) -> int: ...

    def value_of(self, position: int) -> float: ...


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


@dataclass(frozen=True, slots=True)
class QuadraticSliderStrategy:
    """center を境に 2 区間へ分け、各区間で値が位置距離の二乗で増える写像。

    位置 `[0, granularity]` を `center_position` で分割する。
    center からの位置距離を各区間の幅で正規化した比 r に対し、
    値の center からの偏差は `r**2 * gap`（gap は区間側の値幅）になる。
    距離が半分になれば偏差は 1/4 になるので、center 付近ほど細かく操作できる。

    Notes
    -----
    - `position_of()` は範囲外入力を [minimum, maximum] にクランプする（例外は出さない）。
    - `value_of()` は範囲外位置を [0, granularity] にクランプする。
    - 端点は厳密に `minimum` / `maximum` を返す（浮動小数の丸め残りを出さない）。
    """

    minimum: float
    maximum: float
    center: float
    granularity: int

    def __post_init__(self) -> None:
        if not float(self.minimum) < float(self.maximum):
            raise ValueError(
                f"minimum は maximum より小さい必要があります: got=({self.minimum}, {self.maximum})"
            )
        if not float(self.minimum) < float(self.center) < float(self.maximum):
            raise ValueError(
                f"center は (minimum, maximum) の内側である必要があります: got={self.center}"
            )
        if int(self.granularity) < 2:
            raise ValueError(f"granularity は 2 以上である必要があります: got={self.granularity}")

    @property
    def center_position(self) -> int:
        """center に対応する分割位置を返す。"""

        return int(self.granularity) // 2

    @property
    def _left_span(self) -> int:
        return self.center_position

    @property
    def _right_span(self) -> int:
        return int(self.granularity) - self.center_position

    @property
    def _left_gap(self) -> float:
        return float(self.center) - float(self.minimum)

    @property
    def _right_gap(self) -> float:
        return float(self.maximum) - float(self.center)

    def clamp(self, value: float) -> float:
        """value を [minimum, maximum] に丸めて返す。NaN は center とみなす。"""

        v = float(value)
        if math.isnan(v):
            return float(self.center)
        return max(float(self.minimum), min(float(self.maximum), v))

    def position_of(self, value: float) -> int:
        """value に対応するスライダー位置（0..granularity）を返す。"""

        v = self.clamp(value)
        difference = v - float(self.center)
        if difference >= 0.0:
            root = math.sqrt(difference / self._right_gap)
            return self.center_position + _round_half_up(root * self._right_span)
        root = math.sqrt(-difference / self._left_gap)
        return self.center_position - _round_half_up(root * self._left_span)

    def value_of(self, position: int) -> float:
        """スライダー位置に対応する値を返す。"""

        p = max(0, min(int(self.granularity), int(position)))
        if p == 0:
            return float(self.minimum)
        if p == int(self.granularity):
            return float(self.maximum)

        offset = p - self.center_position
        if offset >= 0:
            ratio = offset / self._right_span
            return float(self.center) + ratio * ratio * self._right_gap
        ratio = -offset / self._left_span
        return float(self.center) - ratio * ratio * self._left_gap

    def resolution_at(self, position: int) -> float:
        """position の隣接位置との値の差（大きい方）を返す。

        round trip の許容誤差（局所傾きでスケールした 1 量子化ステップ）として使う。
        """

        p = max(0, min(int(self.granularity), int(position)))
        here = self.value_of(p)
        below = here - self.value_of(max(0, p - 1))
        above = self.value_of(min(int(self.granularity), p + 1)) - here
        return max(below, above)

    # --- ベクトル版（目盛り描画や全位置の検査用）---
    def positions_of(self, values: np.ndarray) -> np.ndarray:
        """values（任意 shape）を位置配列（int64）へ変換して返す。"""

        v = np.asarray(values, dtype=np.float64)
        v = np.where(np.isnan(v), float(self.center), v)
        v = np.clip(v, float(self.minimum), float(self.maximum))
        difference = v - float(self.center)

        right_root = np.sqrt(np.maximum(difference, 0.0) / self._right_gap)
        left_root = np.sqrt(np.maximum(-difference, 0.0) / self._left_gap)
        right = np.floor(right_root * self._right_span + 0.5)
        left = np.floor(left_root * self._left_span + 0.5)

        offset = np.where(difference >= 0.0, right, -left)
        return (self.center_position + offset).astype(np.int64)

    def values_of(self, positions: np.ndarray) -> np.ndarray:
        """positions（任意 shape）を値配列（float64）へ変換して返す。"""

        p = np.clip(np.asarray(positions, dtype=np.int64), 0, int(self.granularity))
        offset = (p - self.center_position).astype(np.float64)

        right_ratio = np.maximum(offset, 0.0) / self._right_span
        left_ratio = np.maximum(-offset, 0.0) / self._left_span
        right = float(self.center) + right_ratio * right_ratio * self._right_gap
        left = float(self.center) - left_ratio * left_ratio * self._left_gap

        out = np.where(offset >= 0.0, right, left)
        out = np.where(p == 0, float(self.minimum), out)
        out = np.where(p == int(self.granularity), float(self.maximum), out)
        return out


def playback_slider_strategy() -> QuadraticSliderStrategy:
    """tempo/pitch スライダー共通の写像（0.10..3.00, center=1.00, 10000 分割）を返す。"""

    return QuadraticSliderStrategy(
        minimum=MINIMUM_PLAYBACK_VALUE,
        maximum=MAXIMUM_PLAYBACK_VALUE,
        center=PIVOT_PLAYBACK_VALUE,
        granularity=SLIDER_GRANULARITY,
    )


__all__ = ["QuadraticSliderStrategy", "SliderStrategy", "playback_slider_strategy"]
