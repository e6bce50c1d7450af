#apps\main.py
"""
アプリケーションのエントリポイント。
このファイルは"薄く"保ち、image_deck.core.main() に処理を渡すだけにする。
"""
from image_deck.core import main


if __name__ == "__main__":
    main()
