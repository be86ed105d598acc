"""core.parameters.persistence をテスト。"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from pitchlock.core.parameters import DualParameterController
from pitchlock.core.parameters.persistence import (
    decode_session_seed,
    default_session_path,
    encode_session_seed,
    load_session_seed,
    save_session_seed,
)
from pitchlock.core.runtime_config import set_config_path


@pytest.fixture(autouse=True)
def _reset_runtime_config() -> None:
    set_config_path(None)
    yield
    set_config_path(None)


def test_encode_contains_only_initial_values() -> None:
    controller = DualParameterController(1.2, 0.8, True)
    controller.update_tempo(2.0)

    assert encode_session_seed(controller) == {
        "initial_tempo": 1.2,
        "initial_pitch": 0.8,
    }


def test_save_and_load(tmp_path: Path) -> None:
    controller = DualParameterController(1.5, 0.5, False)
    path = tmp_path / "nested" / "session.json"

    save_session_seed(controller, path)

    assert path.is_file()
    assert json.loads(path.read_text(encoding="utf-8")) == {
        "initial_tempo": 1.5,
        "initial_pitch": 0.5,
    }
    assert load_session_seed(path) == (1.5, 0.5)


def test_restored_seed_rebuilds_coupling() -> None:
    seed = decode_session_seed({"initial_tempo": 1.5, "initial_pitch": 0.5})

    restored = DualParameterController.from_session_seed(seed)

    assert restored.tempo == 1.5
    assert restored.pitch == 0.5
    assert restored.coupled is False


def test_missing_file_returns_none(tmp_path: Path) -> None:
    assert load_session_seed(tmp_path / "missing.json") is None


def test_broken_json_is_ignored(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    assert load_session_seed(path) is None


def test_non_mapping_payload_is_ignored(tmp_path: Path) -> None:
    path = tmp_path / "list.json"
    path.write_text("[1, 2]", encoding="utf-8")

    assert load_session_seed(path) is None


@pytest.mark.parametrize(
    "data",
    [
        None,
        {},
        {"initial_tempo": "fast", "initial_pitch": None},
        {"initial_tempo": True, "initial_pitch": False},
        {"initial_tempo": float("nan"), "initial_pitch": float("inf")},
    ],
)
def test_decode_falls_back_to_defaults(data: dict | None) -> None:
    assert decode_session_seed(data) == (1.0, 1.0)


def test_decode_keeps_valid_entry() -> None:
    assert decode_session_seed({"initial_tempo": 2, "initial_pitch": "x"}) == (2.0, 1.0)


def test_default_session_path_uses_output_root(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))

    assert default_session_path("main") == Path("data") / "output" / "session" / "main.json"
    assert default_session_path("my profile/1").name == "my_profile_1.json"
    assert default_session_path("///").name == "unknown.json"
