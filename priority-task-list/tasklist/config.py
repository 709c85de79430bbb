from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from tasklist.config_utils import env_bool, env_choice, env_log_level, env_optional_str, env_str
from tasklist.models import DEFAULT_PRIORITY, PRIORITIES
from tasklist.sections import SectionVisibility

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TaskListConfig:
    """Runtime configuration for the task list page.

    This is UI/runtime configuration (not Streamlit's config.toml).
    Env-first with defaults that match the page's stock behaviour.

    Page:
    - TASKLIST_PAGE_TITLE (default: Task List with Priority)
    - TASKLIST_PAGE_ICON (default: ✅)
    - TASKLIST_DEFAULT_PRIORITY: High|Medium|Low, preselected in the form (default: Low)

    Initial section visibility:
    - TASKLIST_SHOW_FORM (default: false)
    - TASKLIST_SHOW_ACTIVE (default: true)
    - TASKLIST_SHOW_COMPLETED (default: true)

    Logging:
    - TASKLIST_LOG_LEVEL (default: INFO)
    - TASKLIST_LOG_DIR: when set, a full DEBUG log is also written there
    """

    page_title: str = "Task List with Priority"
    page_icon: str = "✅"
    default_priority: str = DEFAULT_PRIORITY

    show_form: bool = False
    show_active: bool = True
    show_completed: bool = True

    log_level: int = logging.INFO
    log_dir: Optional[Path] = None

    @classmethod
    def from_env(cls) -> "TaskListConfig":
        raw_priority = os.environ.get("TASKLIST_DEFAULT_PRIORITY")
        default_priority = env_choice("TASKLIST_DEFAULT_PRIORITY", PRIORITIES, DEFAULT_PRIORITY)
        if raw_priority is not None and default_priority.lower() != raw_priority.strip().lower():
            logger.warning("Ignoring TASKLIST_DEFAULT_PRIORITY=%r; using %s", raw_priority, default_priority)

        log_dir = env_optional_str("TASKLIST_LOG_DIR")

        return cls(
            page_title=env_str("TASKLIST_PAGE_TITLE", cls.page_title),
            page_icon=env_str("TASKLIST_PAGE_ICON", cls.page_icon),
            default_priority=default_priority,
            show_form=env_bool("TASKLIST_SHOW_FORM", cls.show_form),
            show_active=env_bool("TASKLIST_SHOW_ACTIVE", cls.show_active),
            show_completed=env_bool("TASKLIST_SHOW_COMPLETED", cls.show_completed),
            log_level=env_log_level("TASKLIST_LOG_LEVEL", cls.log_level),
            log_dir=Path(log_dir) if log_dir else None,
        )

    def initial_sections(self) -> SectionVisibility:
        return SectionVisibility(
            task_list=self.show_form,
            tasks=self.show_active,
            completed_tasks=self.show_completed,
        )
