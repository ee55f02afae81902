#!/usr/bin/env python3
"""
Kana Render - romaji marker to kana renderer

Simple usage:
    python kana.py render notes.md           # Outputs notes-kana.md
    python kana.py render /folder/path       # Renders all files in folder
    python kana.py preview notes.md -c 12    # Show live-preview decorations
"""

import sys
from pathlib import Path

# Add src to path for development
src_path = Path(__file__).parent / "src"
if src_path.exists():
    sys.path.insert(0, str(src_path))

from kana_render.cli import app

if __name__ == "__main__":
    app()
