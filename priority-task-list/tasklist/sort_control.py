from __future__ import annotations

from dataclasses import dataclass

from tasklist.models import ASCENDING, DESCENDING, SORT_BY_DATE, SORT_KEYS, SORT_ORDERS


@dataclass(frozen=True)
class SortState:
    """Active sort key and direction shared by the active and completed lists.

    Selecting the key that is already active flips the direction; selecting
    the other key switches to it and resets the direction to ascending.
    """

    sort_type: str = SORT_BY_DATE
    sort_order: str = ASCENDING

    def __post_init__(self) -> None:
        if self.sort_type not in SORT_KEYS:
            raise ValueError(f"Unknown sort key: {self.sort_type!r}")
        if self.sort_order not in SORT_ORDERS:
            raise ValueError(f"Unknown sort order: {self.sort_order!r}")

    @property
    def ascending(self) -> bool:
        return self.sort_order == ASCENDING

    def select(self, key: str) -> "SortState":
        if key not in SORT_KEYS:
            raise ValueError(f"Unknown sort key: {key!r}")
        if key == self.sort_type:
            flipped = DESCENDING if self.sort_order == ASCENDING else ASCENDING
            return SortState(sort_type=key, sort_order=flipped)
        return SortState(sort_type=key, sort_order=ASCENDING)

    def is_active(self, key: str) -> bool:
        return key == self.sort_type

    def indicator(self, key: str) -> str:
        if not self.is_active(key):
            return ""
        return "↑" if self.ascending else "↓"
