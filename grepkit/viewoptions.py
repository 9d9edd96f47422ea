"""Which parts of a search session are shown."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Mapping


@dataclass
class ViewOptions:
    """Visibility of the search, filter, display, navigate and cache controls."""

    search: bool = False
    filter: bool = False
    display: bool = False
    navigate: bool = False
    cache: bool = False

    def toggle_search(self) -> None:
        self.search = not self.search

    def toggle_filter(self) -> None:
        self.filter = not self.filter

    def toggle_display(self) -> None:
        self.display = not self.display

    def toggle_navigate(self) -> None:
        self.navigate = not self.navigate

    def toggle_cache(self) -> None:
        self.cache = not self.cache

    def all(self) -> bool:
        """Whether every part is shown."""
        return self.search and self.filter and self.display and self.navigate and self.cache

    def set_all(self, value: bool) -> None:
        for item in fields(self):
            setattr(self, item.name, value)

    def to_json(self) -> dict[str, bool]:
        return asdict(self)

    @classmethod
    def from_json(cls, obj: Mapping[str, Any]) -> ViewOptions:
        """Read options; anything other than a JSON ``true`` counts as false."""
        return cls(**{item.name: obj.get(item.name) is True for item in fields(cls)})