"""Kana Render - romaji-to-kana marker rendering for text documents."""

__version__ = "0.1.0"
