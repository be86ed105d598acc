# どこで: `src/pitchlock/interactive/runtime/window_loop.py`。
# 何を: pyglet のダイアログウィンドウを app loop（`pyglet.app.run()`）で回す最小ランナーを提供する。
# なぜ: OS 依存のイベント配送を pyglet に任せ、手動 `dispatch_events()` 由来の入力取りこぼしを避けるため。

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable


@dataclass(frozen=True, slots=True)
class WindowTask:
    """pyglet window と「flip しない描画関数」を束ねる。"""

    # 注: pyglet の Window 型は環境/バージョン差があるため Any に寄せる。
    window: Any

    # 1フレーム分の描画処理（back buffer へ描くだけ）。
    draw_frame: Callable[[], None]


class DialogWindowLoop:
    """ダイアログウィンドウを回し、閉じられるか should_exit() が True になったら止める。"""

    def __init__(
        self,
        task: WindowTask,
        *,
        fps: float,
        should_exit: Callable[[], bool] | None = None,
    ) -> None:
        """ループを初期化する。

        Parameters
        ----------
        task : WindowTask
            1 フレームごとに描画したいウィンドウと描画処理。
        fps : float
            目標フレームレート。`<=0` の場合はスロットリングしない。
        should_exit : Callable[[], bool] | None
            各フレーム末尾に評価し、True ならループを止める。
        """

        self._task = task
        self._fps = float(fps)
        self._should_exit = should_exit

    def run(self) -> None:
        """ウィンドウが閉じられるまでループを実行する。"""

        import pyglet

        task = self._task

        def request_exit(*_: object) -> None:
            # pyglet の on_close から呼ばれるコールバックは引数が来る場合があるため *args を受ける。
            pyglet.app.exit()

        task.window.push_handlers(on_close=request_exit)
        task.window.push_handlers(on_draw=task.draw_frame)

        def draw_once(dt: float) -> None:
            if task.window in pyglet.app.windows:
                task.window.draw(dt)

            should_exit = self._should_exit
            if should_exit is not None and should_exit():
                pyglet.app.exit()

        if self._fps <= 0:
            pyglet.clock.schedule(draw_once)
        else:
            pyglet.clock.schedule_interval(draw_once, 1.0 / float(self._fps))

        try:
            pyglet.app.run(interval=None)
        finally:
            pyglet.clock.unschedule(draw_once)


__all__ = ["DialogWindowLoop", "WindowTask"]
