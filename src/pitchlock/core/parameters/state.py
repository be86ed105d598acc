# どこで: `src/pitchlock/core/parameters/state.py`。
# 何を: ParameterState（tempo/pitch/coupled/skip_silence/step_size の値オブジェクト）を定義する。
# なぜ: UI オブジェクト無しで状態を表現・比較・テストできるようにするため。

from __future__ import annotations

from dataclasses import dataclass

from .bounds import (
    DEFAULT_PITCH,
    DEFAULT_SKIP_SILENCE,
    DEFAULT_STEP_SIZE,
    DEFAULT_TEMPO,
)


@dataclass(frozen=True, slots=True)
class ParameterState:
    """コントロールの現在状態（不変）。

    更新は `dataclasses.replace()` で新しいインスタンスを作り、参照ごと差し替える。
    tempo/pitch は格納前にクランプ済みである前提。
    """

    tempo: float = DEFAULT_TEMPO
    pitch: float = DEFAULT_PITCH
    coupled: bool = True
    skip_silence: bool = DEFAULT_SKIP_SILENCE
    step_size: float = DEFAULT_STEP_SIZE

    def as_triple(self) -> tuple[float, float, bool]:
        """リスナーへ渡す (tempo, pitch, skip_silence) を返す。"""

        return float(self.tempo), float(self.pitch), bool(self.skip_silence)


__all__ = ["ParameterState"]
