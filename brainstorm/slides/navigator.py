"""Clamped back/forward navigation over a slide deck."""

from __future__ import annotations

from collections.abc import Sequence

from .models import Slide

THUMBNAIL_TITLE_CHARS = 20


class SlideNavigator:
    """Tracks the current slide of a fixed-length deck.

    Moving past either end is a no-op: ``previous()`` on the first slide and
    ``next()`` on the last slide leave the index unchanged.
    """

    def __init__(self, slides: Sequence[Slide], index: int = 0) -> None:
        if not slides:
            raise ValueError("SlideNavigator needs at least one slide")
        self._slides = tuple(slides)
        self._index = self._clamp(index)

    def __len__(self) -> int:
        return len(self._slides)

    def _clamp(self, index: int) -> int:
        return max(0, min(len(self._slides) - 1, index))

    @property
    def index(self) -> int:
        return self._index

    @property
    def current(self) -> Slide:
        return self._slides[self._index]

    @property
    def is_first(self) -> bool:
        return self._index == 0

    @property
    def is_last(self) -> bool:
        return self._index == len(self._slides) - 1

    def next(self) -> Slide:
        self._index = self._clamp(self._index + 1)
        return self.current

    def previous(self) -> Slide:
        self._index = self._clamp(self._index - 1)
        return self.current

    def go_to(self, index: int) -> Slide:
        """Jump to *index*, clamped into range."""
        self._index = self._clamp(index)
        return self.current

    def position(self) -> str:
        """Human-readable position, e.g. ``Slide 3 of 11``."""
        return f"Slide {self._index + 1} of {len(self._slides)}"

    def label(self, index: int) -> str:
        """Thumbnail caption for slide *index*, e.g. ``2. Executive Summary``."""
        title = self._slides[index].title
        if len(title) > THUMBNAIL_TITLE_CHARS:
            title = title[:THUMBNAIL_TITLE_CHARS] + "..."
        return f"{index + 1}. {title}"

    def labels(self) -> list[str]:
        return [self.label(i) for i in range(len(self._slides))]
