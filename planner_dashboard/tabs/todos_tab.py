import streamlit as st

from planner_dashboard.constants import DEFAULT_TODO_COLOR, PRIORITIES
from planner_dashboard.data import repositories
from planner_dashboard.metrics import group_todos_by_priority
from planner_dashboard.tabs.common import call_api, section_title
from planner_dashboard.timeline import color_for_priority


def _project_filter(projects):
    options = [None] + [project["id"] for project in projects]
    names = {project["id"]: project["name"] for project in projects}
    return st.selectbox(
        "Project",
        options,
        format_func=lambda value: "All projects" if value is None else names.get(value, value),
        key="todos.project_filter",
    )


def _render_forms(client, projects):
    left, right = st.columns(2)
    with left, st.form("todos.todo_form", clear_on_submit=True):
        st.markdown("**New todo**")
        title = st.text_input("Title")
        description = st.text_area("Description", height=80)
        priority = st.selectbox("Priority", PRIORITIES, index=1)
        estimated = st.number_input("Estimated minutes", min_value=0, value=30, step=5)
        project_id = st.selectbox(
            "Project",
            [None] + [project["id"] for project in projects],
            format_func=lambda value: "None" if value is None else next(
                (p["name"] for p in projects if p["id"] == value), value
            ),
        )
        due = st.date_input("Due date", value=None)
        if st.form_submit_button("Add todo") and title:
            payload = {
                "title": title,
                "description": description or None,
                "priority": priority,
                "estimatedDuration": int(estimated),
                "projectId": project_id,
                "dueDate": due.isoformat() if due else None,
            }
            call_api(repositories.create_todo, client, payload, success="Todo added")
    with right, st.form("todos.project_form", clear_on_submit=True):
        st.markdown("**New project**")
        name = st.text_input("Name")
        description = st.text_area("Description", height=80)
        color = st.color_picker("Color", DEFAULT_TODO_COLOR)
        if st.form_submit_button("Add project") and name:
            call_api(
                repositories.create_project,
                client,
                {"name": name, "description": description or None, "color": color},
                success="Project added",
            )


def _render_projects(client, projects):
    if not projects:
        return
    with st.expander(f"Projects ({len(projects)})"):
        for project in projects:
            cols = st.columns([6, 1])
            cols[0].markdown(
                f"<span style='color:{project.get('color') or DEFAULT_TODO_COLOR}'>●</span> {project['name']}",
                unsafe_allow_html=True,
            )
            # Todos keep their projectId after the project is gone.
            if cols[1].button("Delete", key=f"todos.project_delete.{project['id']}"):
                call_api(repositories.delete_project, client, project["id"], success="Project deleted")
                st.rerun()


def _render_todo_row(client, todo):
    cols = st.columns([1, 6, 1])
    done = cols[0].checkbox("Done", value=bool(todo.get("completed")), key=f"todos.done.{todo['id']}", label_visibility="collapsed")
    if done != bool(todo.get("completed")):
        call_api(repositories.update_todo, client, todo["id"], {"completed": done})
        st.rerun()
    color = color_for_priority(todo.get("priority"))
    cols[1].markdown(
        f"<span style='color:{color}'>●</span> {todo['title']}"
        f" <small>{todo.get('estimatedDuration') or 0} min</small>",
        unsafe_allow_html=True,
    )
    if cols[2].button("Delete", key=f"todos.delete.{todo['id']}"):
        call_api(repositories.delete_todo, client, todo["id"])
        st.rerun()


def render_todos_tab(ctx):
    client = ctx.client
    section_title("Todos")
    projects = call_api(repositories.list_projects, client, default=[])
    project_id = _project_filter(projects)
    todos = call_api(repositories.list_todos, client, project_id, default=[])

    _render_forms(client, projects)
    _render_projects(client, projects)

    for priority, items in group_todos_by_priority(todos).items():
        st.markdown(f"#### {priority.title()} priority ({len(items)})")
        for todo in items:
            _render_todo_row(client, todo)

    completed = [todo for todo in todos if todo.get("completed")]
    with st.expander(f"Completed ({len(completed)})"):
        for todo in completed:
            _render_todo_row(client, todo)
