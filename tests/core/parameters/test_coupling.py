"""core.parameters.coupling をテスト。"""

from __future__ import annotations

import pytest

from pitchlock.core.parameters.coupling import (
    apply_coupling,
    apply_value_update,
    current_value,
)
from pitchlock.core.parameters.state import ParameterState


def test_coupled_update_sets_both_values() -> None:
    state = ParameterState(tempo=1.0, pitch=1.0, coupled=True)

    out = apply_value_update(state, "pitch", 2.0)

    assert (out.tempo, out.pitch) == (2.0, 2.0)
    assert (state.tempo, state.pitch) == (1.0, 1.0)


def test_uncoupled_update_sets_only_target() -> None:
    state = ParameterState(tempo=1.2, pitch=0.8, coupled=False)

    assert apply_value_update(state, "tempo", 2.0).pitch == 0.8
    assert apply_value_update(state, "pitch", 2.0).tempo == 1.2


def test_update_clamps_and_treats_nan_as_pivot() -> None:
    state = ParameterState(coupled=False)

    assert apply_value_update(state, "tempo", 99.0).tempo == 3.0
    assert apply_value_update(state, "tempo", 0.0).tempo == 0.1
    assert apply_value_update(state, "tempo", float("nan")).tempo == 1.0


def test_update_keeps_other_fields() -> None:
    state = ParameterState(coupled=False, skip_silence=True, step_size=0.25)

    out = apply_value_update(state, "tempo", 1.5)

    assert out.skip_silence is True
    assert out.step_size == 0.25
    assert out.coupled is False


def test_unknown_parameter_raises() -> None:
    with pytest.raises(ValueError):
        apply_value_update(ParameterState(), "volume", 1.0)  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        current_value(ParameterState(), "volume")  # type: ignore[arg-type]


def test_coupling_unchanged_returns_same_state() -> None:
    state = ParameterState(coupled=True)
    assert apply_coupling(state, True) is state


def test_decoupling_keeps_values() -> None:
    state = ParameterState(tempo=1.4, pitch=1.4, coupled=True)

    out = apply_coupling(state, False)

    assert out.coupled is False
    assert (out.tempo, out.pitch) == (1.4, 1.4)


@pytest.mark.parametrize(
    ("tempo", "pitch", "expected"),
    [
        (1.2, 0.8, 0.8),
        (0.5, 2.5, 0.5),
        (3.0, 0.1, 0.1),
    ],
)
def test_recoupling_takes_minimum(tempo: float, pitch: float, expected: float) -> None:
    state = ParameterState(tempo=tempo, pitch=pitch, coupled=False)

    out = apply_coupling(state, True)

    assert out.coupled is True
    assert out.tempo == expected
    assert out.pitch == expected


def test_current_value() -> None:
    state = ParameterState(tempo=1.2, pitch=0.8, coupled=False)

    assert current_value(state, "tempo") == 1.2
    assert current_value(state, "pitch") == 0.8


def test_as_triple() -> None:
    state = ParameterState(tempo=1.2, pitch=0.8, coupled=False, skip_silence=True)
    assert state.as_triple() == (1.2, 0.8, True)
