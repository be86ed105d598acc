# どこで: `src/pitchlock/interactive/runtime/__init__.py`。
# 何を: interactive 実行時の「ループ」実装をまとめるパッケージ定義。
# なぜ: `src/pitchlock/api/run.py` の肥大化を防ぐため。

from __future__ import annotations

__all__ = []
