"""
どこで: リポジトリ直下 `main.py`。
何を: 単位円アニメーション（円周のトレース → 代表角の半径線とラベル）をウィンドウで表示する。
なぜ: 動作確認用の最小エントリポイントとして利用するため。

キー操作: S で SVG 保存、P で PNG 保存（resvg が必要）、Escape で終了。
"""

import logging

from unitcircle import run

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    run()
