"""Virtual scrolling: work out which items of a long list are visible."""

from __future__ import annotations

import enum
import math
import sys
from dataclasses import dataclass, field
from typing import Hashable

DEFAULT_ITEM_HEIGHT = 20.0
ARROW_STEP = 20.0


def _to_index(value: float) -> int:
    """Convert a float to a non-negative index, saturating like an unsigned cast."""
    if math.isnan(value) or value <= 0:
        return 0
    if math.isinf(value):
        return sys.maxsize
    return int(value)


class ScrollKey(enum.Enum):
    ARROW_UP = "arrow_up"
    ARROW_DOWN = "arrow_down"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    HOME = "home"
    END = "end"


@dataclass
class VirtualScrollState:
    """Scroll position and visible range for a list of items."""

    total_items: int
    item_height: float | None = None
    item_heights: list[float] = field(default_factory=list)
    scroll_offset: float = 0.0
    viewport_height: float = 0.0
    visible_range: range = range(0)
    total_height: float = 0.0

    @classmethod
    def with_uniform_height(cls, total_items: int, item_height: float) -> VirtualScrollState:
        return cls(
            total_items=total_items,
            item_height=item_height,
            total_height=total_items * item_height,
        )

    def update_viewport(self, viewport_height: float) -> None:
        """Set the viewport height and recompute the visible range."""
        self.viewport_height = viewport_height

        if self.total_items == 0:
            self.visible_range = range(0)
            return

        if self.item_height is not None:
            height = self.item_height
            self.total_height = self.total_items * height
            start = _to_index(math.floor(self.scroll_offset / height))
            end = _to_index(math.ceil((self.scroll_offset + viewport_height) / height)) + 1
            self.visible_range = range(start, min(end, self.total_items))
        else:
            self._calculate_variable_visible_range()

    def _calculate_variable_visible_range(self) -> None:
        if len(self.item_heights) != self.total_items:
            self.item_heights = [DEFAULT_ITEM_HEIGHT] * self.total_items

        self.total_height = sum(self.item_heights)

        accumulated = 0.0
        start = 0
        for i, height in enumerate(self.item_heights):
            if accumulated + height > self.scroll_offset:
                start = i
                break
            accumulated += height

        end = start
        target = self.scroll_offset + self.viewport_height
        for i, height in enumerate(self.item_heights[start:], start):
            if accumulated > target:
                break
            accumulated += height
            end = i + 1

        self.visible_range = range(start, min(end, self.total_items))

    def set_item_height(self, index: int, height: float) -> None:
        """Record the measured height of one item; out-of-range indices are ignored."""
        if index < len(self.item_heights):
            self.item_heights[index] = height
        elif index < self.total_items:
            self.item_heights.extend(
                [DEFAULT_ITEM_HEIGHT] * (self.total_items - len(self.item_heights))
            )
            self.item_heights[index] = height

    def scroll_to_item(self, index: int) -> None:
        if index >= self.total_items:
            return
        if self.item_height is not None:
            self.scroll_offset = max(index * self.item_height, 0.0)
        else:
            self.scroll_offset = max(sum(self.item_heights[:index]), 0.0)

    def scroll_by(self, delta: float) -> None:
        self.scroll_offset = min(
            max(self.scroll_offset + delta, 0.0),
            self.total_height - self.viewport_height,
        )

    def scroll_to_top(self) -> None:
        self.scroll_offset = 0.0

    def scroll_to_bottom(self) -> None:
        self.scroll_offset = max(self.total_height - self.viewport_height, 0.0)

    def at_top(self) -> bool:
        return self.scroll_offset <= 0.0

    def at_bottom(self) -> bool:
        return self.scroll_offset >= self.total_height - self.viewport_height

    def scroll_ratio(self) -> float:
        """Scroll position from 0.0 (top) to 1.0 (bottom)."""
        if self.total_height <= self.viewport_height:
            return 0.0
        return self.scroll_offset / (self.total_height - self.viewport_height)

    def set_scroll_ratio(self, ratio: float) -> None:
        ratio = min(max(ratio, 0.0), 1.0)
        self.scroll_offset = ratio * max(self.total_height - self.viewport_height, 0.0)


class VirtualScroll:
    """A scrolling list widget that only renders its visible items."""

    def __init__(self, id_source: Hashable, total_items: int) -> None:
        self.id = id_source
        self._state = VirtualScrollState(total_items)
        self.scrollbar_visible = True
        self.auto_scroll_enabled = False

    @classmethod
    def with_uniform_height(
        cls, id_source: Hashable, total_items: int, item_height: float
    ) -> VirtualScroll:
        scroll = cls(id_source, total_items)
        scroll._state = VirtualScrollState.with_uniform_height(total_items, item_height)
        return scroll

    def show_scrollbar(self, show: bool) -> VirtualScroll:
        self.scrollbar_visible = show
        return self

    def auto_scroll(self, auto: bool) -> VirtualScroll:
        self.auto_scroll_enabled = auto
        return self

    def state(self) -> VirtualScrollState:
        return self._state

    def handle_wheel(self, delta_y: float) -> None:
        """Apply a mouse-wheel movement measured in points."""
        self._state.scroll_by(-delta_y)

    def handle_key(self, key: ScrollKey) -> None:
        """Apply a navigation key press."""
        state = self._state
        if key is ScrollKey.ARROW_UP:
            state.scroll_by(-ARROW_STEP)
        elif key is ScrollKey.ARROW_DOWN:
            state.scroll_by(ARROW_STEP)
        elif key is ScrollKey.PAGE_UP:
            state.scroll_by(-state.viewport_height)
        elif key is ScrollKey.PAGE_DOWN:
            state.scroll_by(state.viewport_height)
        elif key is ScrollKey.HOME:
            state.scroll_to_top()
        elif key is ScrollKey.END:
            state.scroll_to_bottom()

    def scroll_to_item(self, index: int) -> None:
        self._state.scroll_to_item(index)

    def scroll_by(self, delta: float) -> None:
        self._state.scroll_by(delta)

    def scroll_to_top(self) -> None:
        self._state.scroll_to_top()

    def scroll_to_bottom(self) -> None:
        self._state.scroll_to_bottom()