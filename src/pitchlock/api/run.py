"""
どこで: `src/pitchlock/api/run.py`。公開 API のランナー実装。
何を: pyglet + pyimgui のダイアログで tempo/pitch を操作し、変更をコールバックへ通知するランナーを提供する。
なぜ: `main.py` を実行して実際にダイアログを操作できる経路を用意するため。
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from pitchlock.core.parameters.bounds import (
    DEFAULT_PITCH,
    DEFAULT_SKIP_SILENCE,
    DEFAULT_TEMPO,
)
from pitchlock.core.parameters.controller import (
    DualParameterController,
    FinalizeKind,
    ParametersChangedListener,
)
from pitchlock.core.parameters.persistence import (
    default_session_path,
    load_session_seed,
    save_session_seed,
)
from pitchlock.core.runtime_config import runtime_config, set_config_path

_logger = logging.getLogger(__name__)


def run_parameter_dialog(
    on_change: ParametersChangedListener,
    *,
    tempo: float = DEFAULT_TEMPO,
    pitch: float = DEFAULT_PITCH,
    skip_silence: bool = DEFAULT_SKIP_SILENCE,
    profile_name: str = "default",
    config_path: str | Path | None = None,
    session_persistence: bool = True,
    fps: float = 60.0,
) -> FinalizeKind | None:
    """ダイアログウィンドウを開き、確定されるかウィンドウが閉じられるまで操作を受け付ける。

    Parameters
    ----------
    on_change : ParametersChangedListener
        `(tempo, pitch, skip_silence)` を受け取るコールバック。操作 1 回につき 1 回呼ばれる。
    tempo, pitch, skip_silence
        セッション開始時の値。tempo != pitch なら coupling 無効で始まる。
    profile_name : str
        セッションファイル名（stem）。
    config_path : str | Path | None
        明示 config.yaml。None なら既定の探索に従う。
    session_persistence : bool
        True の場合、確定せずに閉じたセッションの初期値を保存し、次回起動時に復元する。
        確定（Finish/Reset/Cancel）した場合は保存済みファイルを削除する。
    fps : float
        描画フレームレート。

    Returns
    -------
    FinalizeKind | None
        確定した経路（"commit" / "cancel" / "reset"）。確定せずに閉じた場合は None。
    """

    if config_path is not None:
        set_config_path(config_path)
    cfg = runtime_config()

    session_path = default_session_path(profile_name) if session_persistence else None
    seed = load_session_seed(session_path) if session_path is not None else None
    if seed is not None:
        _logger.info("前回セッションの初期値を復元します: tempo=%s pitch=%s", *seed)
        controller = DualParameterController.from_session_seed(
            seed,
            skip_silence=skip_silence,
            listener=on_change,
            step_size=cfg.default_step_size,
        )
    else:
        controller = DualParameterController(
            tempo,
            pitch,
            skip_silence,
            listener=on_change,
            step_size=cfg.default_step_size,
        )

    # GUI は依存が重いので、使うときだけ遅延 import する。
    from pitchlock.interactive.parameter_dialog import (
        PlaybackParameterDialog,
        create_parameter_dialog_window,
    )
    from pitchlock.interactive.runtime.window_loop import DialogWindowLoop, WindowTask

    closers: list[Callable[[], None]] = []
    try:
        width, height = cfg.window_size
        window = create_parameter_dialog_window(
            width=width,
            height=height,
            position=cfg.window_position,
        )
        dialog = PlaybackParameterDialog(window, controller=controller)
        closers.append(dialog.close)

        def draw_frame() -> None:
            dialog.draw_frame()

        loop = DialogWindowLoop(
            WindowTask(window=window, draw_frame=draw_frame),
            fps=fps,
            should_exit=lambda: controller.finalized is not None,
        )
        loop.run()
    finally:
        try:
            if session_path is not None:
                if controller.finalized is None:
                    save_session_seed(controller, session_path)
                else:
                    session_path.unlink(missing_ok=True)
        finally:
            # 作成順の逆で閉じる。
            for close in reversed(closers):
                close()

    return controller.finalized


__all__ = ["run_parameter_dialog"]
