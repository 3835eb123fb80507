#!/usr/bin/env python3
"""
Pane Browser - 위키백과 문서를 가로 페인으로 이어서 탐색 (SDL + Skia)
사용법: python main.py [문서 제목]
예시: python main.py Cat
"""
from pane_browser.__main__ import main


if __name__ == "__main__":
    main()
