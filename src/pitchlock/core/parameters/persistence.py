# どこで: `src/pitchlock/core/parameters/persistence.py`。
# 何を: セッション初期値（initial tempo/pitch）の encode/decode と JSON 永続化を提供する。
# なぜ: ダイアログの破棄/再生成をまたいで「開いた時点の値」だけを復元するため。

from __future__ import annotations

import json
import logging
import math
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pitchlock.core.runtime_config import output_root_dir

from .bounds import DEFAULT_PITCH, DEFAULT_TEMPO
from .controller import DualParameterController

_logger = logging.getLogger(__name__)

INITIAL_TEMPO_KEY = "initial_tempo"
INITIAL_PITCH_KEY = "initial_pitch"


def _sanitize_filename_fragment(text: str) -> str:
    """ファイル名に埋め込めるように text を正規化して返す。"""

    normalized = re.sub(r"[^A-Za-z0-9._-]+", "_", str(text))
    normalized = normalized.strip("._-")
    return normalized or "unknown"


def default_session_path(profile_name: str) -> Path:
    """profile_name に対応するセッションファイルの既定パスを返す。

    Notes
    -----
    パスは `{output_root}/session/{profile_name}.json`。
    """

    fragment = _sanitize_filename_fragment(profile_name)
    return output_root_dir() / "session" / f"{fragment}.json"


def encode_session_seed(controller: DualParameterController) -> dict[str, float]:
    """永続化対象（初期 tempo/pitch の 2 値のみ）を dict で返す。

    現在のスライダー値や skip_silence は含めない。
    """

    tempo, pitch, _skip_silence = controller.initial
    return {INITIAL_TEMPO_KEY: float(tempo), INITIAL_PITCH_KEY: float(pitch)}


def _as_finite_float(value: Any, default: float) -> float:
    if isinstance(value, bool):
        return float(default)
    try:
        f = float(value)
    except (TypeError, ValueError):
        return float(default)
    if not math.isfinite(f):
        return float(default)
    return f


def decode_session_seed(data: Mapping[str, Any] | None) -> tuple[float, float]:
    """dict から (initial_tempo, initial_pitch) を復元する。欠損/不正値は既定値にする。"""

    if not data:
        return float(DEFAULT_TEMPO), float(DEFAULT_PITCH)
    tempo = _as_finite_float(data.get(INITIAL_TEMPO_KEY), DEFAULT_TEMPO)
    pitch = _as_finite_float(data.get(INITIAL_PITCH_KEY), DEFAULT_PITCH)
    return tempo, pitch


def save_session_seed(controller: DualParameterController, path: Path) -> None:
    """セッション初期値を JSON として path に保存する（親ディレクトリは作成する）。"""

    path.parent.mkdir(parents=True, exist_ok=True)
    payload = encode_session_seed(controller)
    path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2) + "\n", encoding="utf-8"
    )


def load_session_seed(path: Path) -> tuple[float, float] | None:
    """path からセッション初期値を読み込む。無い/壊れている場合は None を返す。"""

    try:
        payload = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
    except OSError as exc:
        _logger.warning("セッションファイルを読めません: path=%s err=%s", path, exc)
        return None

    try:
        data = json.loads(payload)
    except json.JSONDecodeError:
        # 破損した JSON は利便性のため無視して既定値で起動する。
        _logger.warning("セッションファイルが壊れているため無視します: path=%s", path)
        return None

    if not isinstance(data, dict):
        _logger.warning("セッションファイルの形式が不正なため無視します: path=%s", path)
        return None
    return decode_session_seed(data)


__all__ = [
    "INITIAL_PITCH_KEY",
    "INITIAL_TEMPO_KEY",
    "decode_session_seed",
    "default_session_path",
    "encode_session_seed",
    "load_session_seed",
    "save_session_seed",
]
