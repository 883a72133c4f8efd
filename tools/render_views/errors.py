from __future__ import annotations


class RenderViewsError(Exception):
    pass


class HistoryResolutionError(RenderViewsError):
    """The history query gave no usable date for a path."""


class ParseError(RenderViewsError):
    """A source file could not be split into front matter and a titled body."""
