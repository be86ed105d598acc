# どこで: `src/pitchlock/core/parameters/invariants.py`。
# 何を: DualParameterController の不変条件をテストで検証する関数を提供する。
# なぜ: 連動中の片側更新（静かな非同期化）を早期検知するため。

from __future__ import annotations

from .bounds import MAXIMUM_PLAYBACK_VALUE, MINIMUM_PLAYBACK_VALUE, STEP_SIZES
from .controller import DualParameterController
from .state import ParameterState


def assert_invariants(controller: DualParameterController) -> None:
    """DualParameterController の不変条件を検査する。

    Notes
    -----
    テスト専用の検査関数。実行時に常時呼ぶことは想定しない。
    """

    state = controller.state
    assert isinstance(state, ParameterState)
    assert MINIMUM_PLAYBACK_VALUE <= state.tempo <= MAXIMUM_PLAYBACK_VALUE
    assert MINIMUM_PLAYBACK_VALUE <= state.pitch <= MAXIMUM_PLAYBACK_VALUE
    assert state.step_size in STEP_SIZES
    if state.coupled:
        assert state.tempo == state.pitch
        assert controller.tempo_position == controller.pitch_position

    granularity = int(controller.strategy.granularity)
    assert 0 <= controller.tempo_position <= granularity
    assert 0 <= controller.pitch_position <= granularity

    tempo, pitch, _skip = controller.initial
    assert MINIMUM_PLAYBACK_VALUE <= tempo <= MAXIMUM_PLAYBACK_VALUE
    assert MINIMUM_PLAYBACK_VALUE <= pitch <= MAXIMUM_PLAYBACK_VALUE


__all__ = ["assert_invariants"]
