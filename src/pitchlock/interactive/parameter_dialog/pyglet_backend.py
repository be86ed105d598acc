# どこで: `src/pitchlock/interactive/parameter_dialog/pyglet_backend.py`。
# 何を: pyglet + imgui の backend（window 生成 / renderer 作成 / IO 同期）を提供する。
# なぜ: ダイアログの描画ループから、backend 固有の処理を分離するため。

from __future__ import annotations

from typing import Any

DEFAULT_WINDOW_WIDTH = 460
DEFAULT_WINDOW_HEIGHT = 360
DEFAULT_CAPTION = "Playback Speed Control"


def _create_imgui_pyglet_renderer(imgui_pyglet_mod: Any, dialog_window: Any) -> Any:
    """pyglet 用の ImGui renderer を作成する。"""

    factory = getattr(imgui_pyglet_mod, "create_renderer", None)
    if callable(factory):
        return factory(dialog_window)
    renderer_type = getattr(imgui_pyglet_mod, "PygletRenderer", None)
    if renderer_type is None:
        raise RuntimeError("imgui.integrations.pyglet renderer is unavailable")
    return renderer_type(dialog_window)


def _sync_imgui_io_for_window(imgui_mod: Any, dialog_window: Any, *, dt: float) -> None:
    """ImGui IO をウィンドウ状態（サイズ/Retina スケール/Δt）に同期する。"""

    io = imgui_mod.get_io()
    io.delta_time = max(float(dt), 1e-4)

    fb_w, fb_h = dialog_window.get_framebuffer_size()
    win_w, win_h = dialog_window.width, dialog_window.height
    io.display_size = (float(win_w), float(win_h))
    io.display_fb_scale = (
        float(fb_w) / float(max(1, win_w)),
        float(fb_h) / float(max(1, win_h)),
    )


def create_parameter_dialog_window(
    *,
    width: int = DEFAULT_WINDOW_WIDTH,
    height: int = DEFAULT_WINDOW_HEIGHT,
    position: tuple[int, int] | None = None,
    caption: str = DEFAULT_CAPTION,
    vsync: bool = False,
) -> Any:
    """パラメータダイアログ用の pyglet ウィンドウを生成する。"""

    import pyglet

    window = pyglet.window.Window(  # type: ignore[abstract]
        width=int(width),
        height=int(height),
        caption=str(caption),
        resizable=False,
        vsync=bool(vsync),
    )
    if position is not None:
        x, y = position
        window.set_location(int(x), int(y))
    return window
