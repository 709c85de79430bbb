from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, Tuple


SECTION_FORM = "taskList"
SECTION_ACTIVE = "tasks"
SECTION_COMPLETED = "completedTasks"
SECTIONS: Tuple[str, ...] = (SECTION_FORM, SECTION_ACTIVE, SECTION_COMPLETED)

_FIELDS: Dict[str, str] = {
    SECTION_FORM: "task_list",
    SECTION_ACTIVE: "tasks",
    SECTION_COMPLETED: "completed_tasks",
}


@dataclass(frozen=True)
class SectionVisibility:
    """Open/closed flags for the three page sections; each flips on its own."""

    task_list: bool = False
    tasks: bool = True
    completed_tasks: bool = True

    def is_open(self, name: str) -> bool:
        return bool(getattr(self, _field(name)))

    def toggle(self, name: str) -> "SectionVisibility":
        field_name = _field(name)
        return replace(self, **{field_name: not getattr(self, field_name)})

    def to_dict(self) -> Dict[str, bool]:
        return {name: self.is_open(name) for name in SECTIONS}


def _field(name: str) -> str:
    try:
        return _FIELDS[name]
    except KeyError:
        raise ValueError(f"Unknown section: {name!r}") from None
