# どこで: `src/pitchlock/api/__init__.py`。
# 何を: 公開 API パッケージのエントリポイントとして run_parameter_dialog を再エクスポートする。
# なぜ: ユーザーコードからシンプルに API を import できるようにするため。

from __future__ import annotations

__all__ = ["run_parameter_dialog"]


def run_parameter_dialog(*args, **kwargs):
    """公開 run API へのラッパ（遅延インポートで GUI 依存を後回しにする）。"""

    from .run import run_parameter_dialog as _run

    return _run(*args, **kwargs)
