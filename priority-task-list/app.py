import streamlit as st

from tasklist.config import TaskListConfig
from tasklist.forms import combine_deadline
from tasklist.logging_setup import setup_logging
from tasklist.models import PRIORITIES, SORT_BY_DATE, SORT_BY_PRIORITY
from tasklist.render import (
    FOOTER_TEXT,
    empty_list_html,
    section_toggle_label,
    sort_button_label,
    task_item_html,
)
from tasklist.sections import SECTION_ACTIVE, SECTION_COMPLETED, SECTION_FORM
from tasklist.state import TaskListState
from tasklist.theme import set_theme

config = TaskListConfig.from_env()
setup_logging(console_level=config.log_level, log_dir=config.log_dir)
set_theme(page_title=config.page_title, page_icon=config.page_icon)

STATE_KEY = "task_list_state"

# ----- Initialize session state -----
# Widget keys get their defaults here, before the widgets exist, so the form
# callback can reset them after a successful add.
if STATE_KEY not in st.session_state:
    st.session_state[STATE_KEY] = TaskListState(sections=config.initial_sections())
if "new-title" not in st.session_state:
    st.session_state["new-title"] = ""
if "new-priority" not in st.session_state:
    st.session_state["new-priority"] = config.default_priority
if "new-due-date" not in st.session_state:
    st.session_state["new-due-date"] = None
if "new-due-time" not in st.session_state:
    st.session_state["new-due-time"] = None

state: TaskListState = st.session_state[STATE_KEY]


def _submit_task():
    task = state.add_task(
        st.session_state["new-title"],
        st.session_state["new-priority"],
        combine_deadline(st.session_state["new-due-date"], st.session_state["new-due-time"]),
    )
    if task is None:
        st.session_state["form-error"] = "A title and a deadline are required."
        return
    st.session_state.pop("form-error", None)
    st.session_state["new-title"] = ""
    st.session_state["new-priority"] = config.default_priority
    st.session_state["new-due-date"] = None
    st.session_state["new-due-time"] = None


def section_header(title: str, section: str, level: str = "##"):
    head, toggle = st.columns([6, 1])
    with head:
        st.markdown(f"{level} {title}")
    with toggle:
        if st.button(section_toggle_label(state.sections.is_open(section)), key=f"toggle-{section}"):
            state.toggle_section(section)
            st.rerun()


def task_rows(tasks, *, allow_complete: bool, empty_message: str):
    if not tasks:
        st.markdown(empty_list_html(empty_message), unsafe_allow_html=True)
        return
    for task in tasks:
        info, buttons = st.columns([5, 2])
        with info:
            st.markdown(task_item_html(task), unsafe_allow_html=True)
        with buttons:
            if allow_complete and st.button("Complete", key=f"complete-{task.id}"):
                state.complete_task(task.id)
                st.rerun()
            if st.button("Delete", key=f"delete-{task.id}"):
                state.delete_task(task.id)
                st.rerun()


# ----- Layout -----
with st.container(border=True):
    section_header("Task List with Priority", SECTION_FORM, level="#")
    if state.sections.is_open(SECTION_FORM):
        with st.form("add-task", clear_on_submit=False):
            st.text_input("Task title", key="new-title", placeholder="Task title")
            st.selectbox("Priority", options=list(reversed(PRIORITIES)), key="new-priority")
            dc1, dc2 = st.columns(2)
            with dc1:
                st.date_input("Deadline date", value=None, key="new-due-date")
            with dc2:
                st.time_input("Deadline time", value=None, key="new-due-time")
            st.form_submit_button("Add task", on_click=_submit_task)
        if st.session_state.get("form-error"):
            st.warning(st.session_state["form-error"])

with st.container(border=True):
    section_header("Tasks", SECTION_ACTIVE)
    sc1, sc2 = st.columns(2)
    with sc1:
        if st.button(
            sort_button_label("By Date", SORT_BY_DATE, state.sort),
            key="sort-date",
            type="primary" if state.sort.is_active(SORT_BY_DATE) else "secondary",
            use_container_width=True,
        ):
            state.select_sort(SORT_BY_DATE)
            st.rerun()
    with sc2:
        if st.button(
            sort_button_label("By Priority", SORT_BY_PRIORITY, state.sort),
            key="sort-priority",
            type="primary" if state.sort.is_active(SORT_BY_PRIORITY) else "secondary",
            use_container_width=True,
        ):
            state.select_sort(SORT_BY_PRIORITY)
            st.rerun()
    if state.sections.is_open(SECTION_ACTIVE):
        task_rows(state.views.active, allow_complete=True, empty_message="No active tasks.")

with st.container(border=True):
    section_header("Completed Task", SECTION_COMPLETED)
    if state.sections.is_open(SECTION_COMPLETED):
        task_rows(state.views.completed, allow_complete=False, empty_message="No completed tasks yet.")

st.markdown(f'<footer class="footer"><p>{FOOTER_TEXT}</p></footer>', unsafe_allow_html=True)
