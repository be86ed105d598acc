"""
どこで: リポジトリ直下 `main.py`。
何を: tempo/pitch ダイアログを開き、変更をログへ出す。
なぜ: 動作確認用の最小エントリポイントとして利用するため。
"""

import logging
import sys

sys.path.append("src")

from pitchlock import run_parameter_dialog

logger = logging.getLogger("pitchlock.demo")


def on_change(tempo: float, pitch: float, skip_silence: bool) -> None:
    logger.info("tempo=%.4f pitch=%.4f skip_silence=%s", tempo, pitch, skip_silence)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    kind = run_parameter_dialog(
        on_change,
        tempo=1.0,
        pitch=1.0,
        skip_silence=False,
        profile_name="main",
    )
    logger.info("finalized: %s", kind)
