"""Validated record formats for alias data."""

from .records import EmojiRecord, GemojiRecord

__all__ = ["EmojiRecord", "GemojiRecord"]
