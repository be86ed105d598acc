# どこで: `src/pitchlock/core/parameters/controller.py`。
# 何を: tempo/pitch/skip_silence/coupling/step_size の唯一の状態源（DualParameterController）を提供する。
# なぜ: スライダー/ステップボタン/連動トグルの整合をコア側で保証し、UI は結果を描くだけにするため。

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import replace
from typing import Literal

from .bounds import (
    DEFAULT_PITCH,
    DEFAULT_SKIP_SILENCE,
    DEFAULT_STEP_SIZE,
    DEFAULT_TEMPO,
    STEP_DOWN,
    STEP_UP,
    canonical_step_size,
    clamp_playback_value,
)
from .coupling import ParameterName, apply_coupling, apply_value_update, current_value
from .slider_strategy import SliderStrategy, playback_slider_strategy
from .state import ParameterState

_logger = logging.getLogger(__name__)

# (tempo, pitch, skip_silence) を受け取る。値は Python の float（64bit）のまま渡し、
# 32bit への丸めは受け取り側（再生エンジン）に任せる。
ParametersChangedListener = Callable[[float, float, bool], None]
FinalizeKind = Literal["commit", "cancel", "reset"]

FACTORY_DEFAULTS: tuple[float, float, bool] = (
    DEFAULT_TEMPO,
    DEFAULT_PITCH,
    DEFAULT_SKIP_SILENCE,
)


class DualParameterController:
    """tempo/pitch を管理し、変更をリスナーへ通知するコントローラ。

    Notes
    -----
    - すべての操作は同期的に完了する。状態は `ParameterState` の差し替えで一括更新するため、
      連動中に片側だけ更新された中間状態は外部から観測されない。
    - 1 回の操作で通知は高々 1 回（リスナーごと）。
    - 数値入力はクランプされ、例外にはならない。
      列挙外のステップ幅/方向などプログラミングエラーだけが ValueError になる。
    """

    def __init__(
        self,
        tempo: float = DEFAULT_TEMPO,
        pitch: float = DEFAULT_PITCH,
        skip_silence: bool = DEFAULT_SKIP_SILENCE,
        *,
        listener: ParametersChangedListener | None = None,
        strategy: SliderStrategy | None = None,
        step_size: float = DEFAULT_STEP_SIZE,
    ) -> None:
        self._strategy: SliderStrategy = (
            strategy if strategy is not None else playback_slider_strategy()
        )
        self._listeners: list[ParametersChangedListener] = []
        if listener is not None:
            self._listeners.append(listener)

        self._state = ParameterState(step_size=self._validated_step_size(step_size))
        self._initial: tuple[float, float, bool] = FACTORY_DEFAULTS
        self._finalized: FinalizeKind | None = None
        self.initialize(tempo, pitch, skip_silence)

    @classmethod
    def from_session_seed(
        cls,
        seed: tuple[float, float] | None,
        *,
        skip_silence: bool = DEFAULT_SKIP_SILENCE,
        listener: ParametersChangedListener | None = None,
        step_size: float = DEFAULT_STEP_SIZE,
    ) -> "DualParameterController":
        """復元した初期値 (tempo, pitch) から作り直す。seed=None なら既定値で作る。"""

        tempo, pitch = (DEFAULT_TEMPO, DEFAULT_PITCH) if seed is None else seed
        return cls(
            tempo,
            pitch,
            skip_silence,
            listener=listener,
            step_size=step_size,
        )

    # --- 参照 ---
    @property
    def state(self) -> ParameterState:
        return self._state

    @property
    def tempo(self) -> float:
        return float(self._state.tempo)

    @property
    def pitch(self) -> float:
        return float(self._state.pitch)

    @property
    def coupled(self) -> bool:
        return bool(self._state.coupled)

    @property
    def skip_silence(self) -> bool:
        return bool(self._state.skip_silence)

    @property
    def step_size(self) -> float:
        return float(self._state.step_size)

    @property
    def initial(self) -> tuple[float, float, bool]:
        """initialize 時点の (tempo, pitch, skip_silence)。"""

        return self._initial

    @property
    def strategy(self) -> SliderStrategy:
        return self._strategy

    @property
    def tempo_position(self) -> int:
        """現在の tempo に対応するスライダー位置。"""

        return self._strategy.position_of(self._state.tempo)

    @property
    def pitch_position(self) -> int:
        """現在の pitch に対応するスライダー位置。"""

        return self._strategy.position_of(self._state.pitch)

    @property
    def finalized(self) -> FinalizeKind | None:
        """最後に実行された確定経路（未確定なら None）。"""

        return self._finalized

    # --- リスナー ---
    def add_listener(self, listener: ParametersChangedListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: ParametersChangedListener) -> None:
        try:
            self._listeners.remove(listener)
        except ValueError:
            return

    # --- 操作 ---
    def initialize(self, tempo: float, pitch: float, skip_silence: bool) -> None:
        """初期値で状態を作り直す（通知しない）。

        初期 tempo/pitch が異なれば coupling は無効、同じなら有効で始まる。
        coupling を自動で決めるのはここだけ。比較はクランプ前の値で行う
        （範囲外の異なる 2 値が同じ端点に丸められても連動させない）。
        """

        t = clamp_playback_value(tempo)
        p = clamp_playback_value(pitch)
        s = bool(skip_silence)
        self._initial = (t, p, s)
        self._finalized = None
        self._state = ParameterState(
            tempo=t,
            pitch=p,
            coupled=(float(tempo) == float(pitch)),
            skip_silence=s,
            step_size=self._state.step_size,
        )

    def update_tempo(self, raw_value: float) -> None:
        self._update("tempo", raw_value)

    def update_pitch(self, raw_value: float) -> None:
        self._update("pitch", raw_value)

    def step_tempo(self, direction: int) -> None:
        self._step("tempo", direction)

    def step_pitch(self, direction: int) -> None:
        self._step("pitch", direction)

    def slider_moved(
        self, parameter: ParameterName, position: int, *, from_user: bool = True
    ) -> None:
        """スライダー位置の変更を反映する。

        from_user=False（プログラムからの位置反映）は無視する。
        """

        if not from_user:
            return
        self._update(parameter, self._strategy.value_of(int(position)))

    def set_coupled(self, coupled: bool) -> None:
        """coupling を切り替える。

        有効化したときだけ値を最小側へ揃えて通知する。無効化は値を変えず、通知もしない。
        """

        was_coupled = self._state.coupled
        self._state = apply_coupling(self._state, coupled)
        if self._state.coupled and not was_coupled:
            self._notify_current()

    def set_skip_silence(self, skip_silence: bool) -> None:
        self._state = replace(self._state, skip_silence=bool(skip_silence))
        self._notify_current()

    def set_step_size(self, step_size: float) -> None:
        """ステップ幅を列挙値のいずれかに設定する（通知しない）。"""

        self._state = replace(self._state, step_size=self._validated_step_size(step_size))

    # --- 確定経路 ---
    def commit(self) -> tuple[float, float, bool]:
        """現在値を通知して返す。"""

        self._finalized = "commit"
        triple = self._state.as_triple()
        self._notify(*triple)
        return triple

    def cancel(self) -> tuple[float, float, bool]:
        """initialize 時点の値を通知して返す（内部状態は変えない）。"""

        self._finalized = "cancel"
        self._notify(*self._initial)
        return self._initial

    def reset(self) -> tuple[float, float, bool]:
        """工場出荷値 (1.00, 1.00, False) を通知して返す（内部状態は変えない）。"""

        self._finalized = "reset"
        self._notify(*FACTORY_DEFAULTS)
        return FACTORY_DEFAULTS

    def finalize(self, kind: FinalizeKind) -> tuple[float, float, bool]:
        """kind に対応する確定経路を実行する。"""

        if kind == "commit":
            return self.commit()
        if kind == "cancel":
            return self.cancel()
        if kind == "reset":
            return self.reset()
        raise ValueError(f"unknown finalize kind: {kind!r}")

    # --- 内部 ---
    def _update(self, parameter: ParameterName, raw_value: float) -> None:
        self._state = apply_value_update(self._state, parameter, raw_value)
        self._notify_current()

    def _step(self, parameter: ParameterName, direction: int) -> None:
        if direction not in (STEP_UP, STEP_DOWN):
            raise ValueError(f"direction は +1 か -1 である必要があります: got={direction!r}")
        base = current_value(self._state, parameter)
        self._update(parameter, base + int(direction) * float(self._state.step_size))

    @staticmethod
    def _validated_step_size(step_size: float) -> float:
        canonical = canonical_step_size(step_size)
        if canonical is None:
            raise ValueError(f"unsupported step size: {step_size!r}")
        return canonical

    def _notify_current(self) -> None:
        self._notify(*self._state.as_triple())

    def _notify(self, tempo: float, pitch: float, skip_silence: bool) -> None:
        _logger.debug(
            "Setting playback parameters to tempo=[%s], pitch=[%s], skip_silence=[%s]",
            tempo,
            pitch,
            skip_silence,
        )
        for listener in tuple(self._listeners):
            listener(float(tempo), float(pitch), bool(skip_silence))


__all__ = [
    "DualParameterController",
    "FACTORY_DEFAULTS",
    "FinalizeKind",
    "ParametersChangedListener",
]
