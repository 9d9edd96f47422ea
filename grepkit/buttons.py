"""Buttons floating over table rows or columns, and groups of them."""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Optional


class Orientation(Enum):
    """Whether a button follows rows (vertical) or columns (horizontal)."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class ButtonType(Enum):
    """How a button chooses the section it belongs to."""

    VARIABLE = "variable"
    FIXED = "fixed"
    PREPEND = "prepend"
    APPEND = "append"


class ButtonPosition(Enum):
    """Whether a button sits inside a section or on the border between two."""

    INSIDE = "inside"
    BETWEEN = "between"


class TableButton:
    """A configurable button; the configuring methods return the button itself."""

    def __init__(self, id: int) -> None:
        self.id = id
        self.orientation = Orientation.VERTICAL
        self.button_type = ButtonType.VARIABLE
        self.position = ButtonPosition.INSIDE
        self.index = -1
        self.text = ""
        self.size: Optional[tuple[int, int]] = None
        self.natural_size: tuple[int, int] = (0, 0)
        self.offset: tuple[int, int] = (0, 0)
        self.current_index = -1

    def __repr__(self) -> str:
        return (
            f"TableButton(id={self.id}, {self.orientation.value}, "
            f"{self.button_type.value}, {self.position.value})"
        )

    def fixed(self, index: int) -> TableButton:
        """Pin the button to section ``index``."""
        self.button_type = ButtonType.FIXED
        self.index = index
        return self

    def variable(self) -> TableButton:
        """Let the button follow the section under the pointer."""
        self.button_type = ButtonType.VARIABLE
        return self

    def inside(self) -> TableButton:
        self.position = ButtonPosition.INSIDE
        return self

    def between(self) -> TableButton:
        self.position = ButtonPosition.BETWEEN
        return self

    def insert(self) -> TableButton:
        """Configure as an insert button: follows the pointer, between sections."""
        self.button_type = ButtonType.VARIABLE
        self.position = ButtonPosition.BETWEEN
        return self

    def remove(self) -> TableButton:
        """Configure as a remove button: follows the pointer, inside a section."""
        self.button_type = ButtonType.VARIABLE
        self.position = ButtonPosition.INSIDE
        return self

    def append(self) -> TableButton:
        """Configure as an append button after the last section."""
        self.button_type = ButtonType.APPEND
        self.position = ButtonPosition.BETWEEN
        return self

    def prepend(self) -> TableButton:
        """Configure as a prepend button before the first section."""
        self.button_type = ButtonType.PREPEND
        self.position = ButtonPosition.BETWEEN
        return self

    def horizontal(self) -> TableButton:
        self.orientation = Orientation.HORIZONTAL
        return self

    def vertical(self) -> TableButton:
        self.orientation = Orientation.VERTICAL
        return self

    def with_text(self, text: str) -> TableButton:
        self.text = text
        return self

    def with_size(self, width: int, height: int) -> TableButton:
        self.size = (width, height)
        return self

    def with_offset(self, x: int, y: int) -> TableButton:
        self.offset = (x, y)
        return self

    def is_fixed(self) -> bool:
        return self.button_type is ButtonType.FIXED

    def _effective_size(self) -> tuple[int, int]:
        if self.size is not None and self.size[0] > 0 and self.size[1] > 0:
            return self.size
        return self.natural_size

    def top(self) -> int:
        return self.offset[1]

    def left(self) -> int:
        return self.offset[0]

    def bottom(self) -> int:
        return self._effective_size()[1] + self.top()

    def right(self) -> int:
        return self._effective_size()[0] + self.left()


class TableButtonGroup(list):
    """The buttons of one orientation, with their joint bounds."""

    def __init__(self, buttons: Iterable[TableButton], orientation: Orientation) -> None:
        super().__init__(b for b in buttons if b.orientation is orientation)

    def left(self) -> int:
        return min(button.left() for button in self)

    def right(self) -> int:
        return max(button.right() for button in self)

    def top(self) -> int:
        return min(button.top() for button in self)

    def bottom(self) -> int:
        return max(button.bottom() for button in self)

    def width(self) -> int:
        return self.right() - self.left()

    def height(self) -> int:
        return self.bottom() - self.top()