# どこで: `src/pitchlock/interactive/parameter_dialog/__init__.py`。
# 何を: パラメータダイアログの公開 API を集約する。
# なぜ: 実装を責務ごとに分割しつつ、利用側の import パスを安定させるため。

from __future__ import annotations

from .dialog import PlaybackParameterDialog
from .pyglet_backend import create_parameter_dialog_window
from .view import DialogView, SliderRow, dialog_view
from .widgets import render_dialog_controls

__all__ = [
    "DialogView",
    "PlaybackParameterDialog",
    "SliderRow",
    "create_parameter_dialog_window",
    "dialog_view",
    "render_dialog_controls",
]
