"""Placement of floating buttons along the rows and columns of a table."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import accumulate
from typing import Iterable

from grepkit.buttons import (
    ButtonPosition,
    ButtonType,
    Orientation,
    TableButton,
    TableButtonGroup,
)


class Header:
    """Sections of one table header, as sizes, scrolled by ``offset`` pixels."""

    def __init__(self, sizes: Iterable[int], offset: int = 0) -> None:
        self._sizes = list(sizes)
        self._starts = [0, *accumulate(self._sizes)]
        self.offset = offset

    def __repr__(self) -> str:
        return f"Header({self._sizes!r}, offset={self.offset})"

    def count(self) -> int:
        return len(self._sizes)

    def _valid(self, index: int) -> bool:
        return 0 <= index < len(self._sizes)

    def section_position(self, index: int) -> int:
        """Start of section ``index`` in viewport coordinates, or -1 if there is none."""
        if not self._valid(index):
            return -1
        return self._starts[index] - self.offset

    def section_size(self, index: int) -> int:
        """Size of section ``index``, or 0 if there is none."""
        if not self._valid(index):
            return 0
        return self._sizes[index]

    def visual_index_at(self, pos: int) -> int:
        """Section under viewport position ``pos``, or -1 if none is."""
        logical = pos + self.offset
        for index, size in enumerate(self._sizes):
            start = self._starts[index]
            if start <= logical < start + size:
                return index
        return -1


@dataclass(frozen=True)
class Placement:
    """Where a button goes: its position and the section it is attached to."""

    id: int
    visible: bool
    x: int = 0
    y: int = 0
    index: int = -1


def index_at(header: Header, pos: int) -> int:
    """Section under ``pos``; positions past the sections give the last one."""
    index = header.visual_index_at(pos)
    if index < 0:
        index = header.count() - 1
    return index


def pos_center(header: Header, pos: int) -> tuple[int, int]:
    """Centre of the section under ``pos`` and that section's index."""
    index = index_at(header, pos)
    return pos_center_fixed(header, index), index


def pos_border(header: Header, pos: int) -> tuple[int, int]:
    """Nearest border of the section under ``pos`` and the index of the section after it."""
    index = index_at(header, pos)
    top = header.section_position(index)
    bottom = top + header.section_size(index)
    if pos - top < bottom - pos:
        return top, index
    return bottom, index + 1


def pos_center_fixed(header: Header, index: int) -> int:
    """Centre of section ``index``."""
    return header.section_position(index) + header.section_size(index) // 2


def pos_border_fixed(header: Header, index: int) -> int:
    """Start of section ``index``; past the last section, the end of the last one."""
    if index >= header.count():
        return header.section_position(index - 1) + header.section_size(index - 1)
    return header.section_position(index)


def fixed_button_index(header: Header, button: TableButton) -> int:
    """Section a non-following button is attached to."""
    if button.button_type is ButtonType.PREPEND:
        return 0
    if button.button_type is ButtonType.APPEND:
        return header.count()
    return button.index


def vertical_buttons_x(
    viewport_width: int, shift: int, horizontal_header: Header, buttons_width: int
) -> int:
    """Left edge of the row buttons: after the last column, kept inside the viewport."""
    last = horizontal_header.count() - 1
    x0 = horizontal_header.section_position(last) + horizontal_header.section_size(last) + shift
    if x0 + buttons_width > viewport_width + shift:
        x0 = viewport_width + shift - buttons_width
    return x0


def horizontal_buttons_y(
    viewport_height: int, shift: int, vertical_header: Header, buttons_height: int
) -> int:
    """Top edge of the column buttons: below the last row, kept inside the viewport."""
    last = vertical_header.count() - 1
    y0 = vertical_header.section_position(last) + vertical_header.section_size(last) + shift
    if y0 + buttons_height > viewport_height + shift:
        y0 = viewport_height + shift - buttons_height
    return y0


def _centered(value: int, shift: int, button_size: int) -> int:
    return value + shift - button_size // 2 - 1


def _along(button: TableButton, header: Header, pointer: int, shift: int, size: int) -> tuple[int, int]:
    if button.button_type is ButtonType.VARIABLE:
        if button.position is ButtonPosition.INSIDE:
            value, index = pos_center(header, pointer)
        else:
            value, index = pos_border(header, pointer)
    else:
        index = fixed_button_index(header, button)
        if button.position is ButtonPosition.INSIDE:
            value = pos_center_fixed(header, index)
        else:
            value = pos_border_fixed(header, index)
    return _centered(value, shift, size), index


class TableButtons:
    """A set of buttons, keyed by id, laid out over a table."""

    def __init__(self) -> None:
        self._buttons: dict[int, TableButton] = {}
        self.visible = True

    def __len__(self) -> int:
        return len(self._buttons)

    def __iter__(self):
        return iter(self._ordered())

    def _ordered(self) -> list[TableButton]:
        return [self._buttons[key] for key in sorted(self._buttons)]

    def next_id(self) -> int:
        """Smallest id not yet in use."""
        candidate = 0
        while candidate in self._buttons:
            candidate += 1
        return candidate

    def button(self, id: int) -> TableButton:
        """Button with ``id``, created if missing; a negative id takes the next free one."""
        if id < 0:
            id = self.next_id()
        if id not in self._buttons:
            self._buttons[id] = TableButton(id)
        return self._buttons[id]

    def clear(self) -> None:
        self._buttons.clear()

    def layout(
        self,
        vertical_header: Header,
        horizontal_header: Header,
        viewport_width: int,
        viewport_height: int,
        shift_x: int,
        shift_y: int,
        point: tuple[int, int],
    ) -> list[Placement]:
        """Place every button for the pointer at ``point`` (viewport coordinates).

        Row buttons come first, then column buttons, each in id order.
        """
        placements: list[Placement] = []
        buttons = self._ordered()

        rows = TableButtonGroup(buttons, Orientation.VERTICAL)
        if rows:
            x0 = vertical_buttons_x(viewport_width, shift_x, horizontal_header, rows.width())
            for button in rows:
                if not self.visible:
                    placements.append(Placement(button.id, False))
                    continue
                height = button.bottom() - button.top()
                y, index = _along(button, vertical_header, point[1], shift_y, height)
                button.current_index = index
                placements.append(
                    Placement(button.id, True, x0 + button.offset[0], y + button.offset[1], index)
                )

        columns = TableButtonGroup(buttons, Orientation.HORIZONTAL)
        if columns:
            y0 = horizontal_buttons_y(viewport_height, shift_y, vertical_header, columns.height())
            for button in columns:
                if not self.visible:
                    placements.append(Placement(button.id, False))
                    continue
                width = button.right() - button.left()
                x, index = _along(button, horizontal_header, point[0], shift_x, width)
                button.current_index = index
                placements.append(
                    Placement(button.id, True, x + button.offset[0], y0 + button.offset[1], index)
                )

        return placements