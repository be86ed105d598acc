# どこで: `src/pitchlock/interactive/parameter_dialog/dialog.py`。
# 何を: DualParameterController を pyimgui で操作するダイアログ（初期化/1フレーム描画/破棄）を提供する。
# なぜ: 依存の重いライフサイクル管理を 1 箇所に閉じ込め、コアを純粋に保つため。

from __future__ import annotations

import logging
import time
from typing import Any

from pitchlock.core.parameters.controller import DualParameterController, FinalizeKind
from pitchlock.core.parameters.events import dispatch_events

from .pyglet_backend import _create_imgui_pyglet_renderer, _sync_imgui_io_for_window
from .view import dialog_view
from .widgets import render_dialog_controls

_logger = logging.getLogger(__name__)


class PlaybackParameterDialog:
    """pyimgui で tempo/pitch を操作するダイアログ。

    `draw_frame()` を呼ぶことで 1 フレーム分の UI を描画し、操作をコントローラへ流す。
    描画はコントローラ状態のスナップショット（DialogView）だけを読むため、
    片側のスライダーが他方を書き換えるような再入は起きない。
    """

    def __init__(
        self,
        dialog_window: Any,
        *,
        controller: DualParameterController,
        title: str = "Playback Speed Control",
    ) -> None:
        """ダイアログの初期化（ImGui コンテキスト / renderer 作成）。"""

        import imgui  # type: ignore[import-untyped]

        # imgui の pyglet backend は環境によって import 経路が揺れるため、明示的にここで解決する。
        try:
            from imgui.integrations import (
                pyglet as imgui_pyglet,  # type: ignore[import-untyped]
            )
        except ImportError as exc:
            raise RuntimeError(f"imgui.integrations.pyglet を import できない: {exc}") from exc

        self._window = dialog_window
        self._controller = controller
        self._title = str(title)

        # ImGui は「グローバルな current context」を前提にするため、自前コンテキストを作って切り替えながら使う。
        self._imgui = imgui
        self._context = imgui.create_context()
        imgui.style_colors_dark()
        imgui.set_current_context(self._context)

        self._renderer = _create_imgui_pyglet_renderer(imgui_pyglet, dialog_window)

        self._prev_time = time.monotonic()
        self._closed = False

    @property
    def controller(self) -> DualParameterController:
        return self._controller

    def draw_frame(self) -> FinalizeKind | None:
        """1 フレーム分のダイアログを描画し、操作を反映する。

        確定ボタン（Finish/Reset/Cancel）が押されたフレームではその kind を返す。
        `flip()` は呼ばない。呼び出し側が担当する。
        """

        if self._closed:
            return None

        now = time.monotonic()
        dt = now - self._prev_time
        self._prev_time = now

        imgui = self._imgui
        imgui.set_current_context(self._context)

        # --- ImGui フレーム開始 ---
        imgui.new_frame()
        _sync_imgui_io_for_window(imgui, self._window, dt=dt)

        # ダイアログは 1 ウィンドウで全面表示する（位置/サイズ固定）。
        imgui.set_next_window_position(0, 0)
        imgui.set_next_window_size(self._window.width, self._window.height)
        imgui.begin(
            self._title,
            flags=imgui.WINDOW_NO_RESIZE
            | imgui.WINDOW_NO_COLLAPSE
            | imgui.WINDOW_NO_TITLE_BAR,
        )
        try:
            events = render_dialog_controls(dialog_view(self._controller))
        finally:
            imgui.end()

        # --- ImGui フレーム終了（draw_data 構築）---
        imgui.render()

        import pyglet

        pyglet.gl.glClearColor(0.12, 0.12, 0.12, 1.0)
        self._window.clear()
        self._renderer.render(imgui.get_draw_data())

        # 描画が終わってから反映する（このフレームの表示は操作前の状態で一貫させる）。
        dispatch_events(self._controller, events)
        finalized = self._controller.finalized
        if finalized is not None:
            _logger.info("ダイアログを確定しました: kind=%s", finalized)
        return finalized

    def close(self) -> None:
        """ダイアログを終了し、コンテキストとウィンドウを破棄する。"""

        # 二重 close を許容する（呼び出し側の finally から安全に呼べるようにする）。
        if self._closed:
            return
        self._closed = True

        shutdown = getattr(self._renderer, "shutdown", None)
        if callable(shutdown):
            shutdown()
        self._imgui.destroy_context(self._context)
        self._window.close()
