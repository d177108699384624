import streamlit as st

from planner_dashboard.data import repositories
from planner_dashboard.state import session_slices
from planner_dashboard.tabs.common import call_api, section_title

SLICE = "passwords"


def _password_fields(prefix, record=None):
    record = record or {}
    return {
        "siteName": st.text_input("Site", value=record.get("siteName", ""), key=f"{prefix}.site"),
        "url": st.text_input("URL", value=record.get("url") or "", key=f"{prefix}.url") or None,
        "username": st.text_input("Username", value=record.get("username") or "", key=f"{prefix}.username") or None,
        "email": st.text_input("Email", value=record.get("email") or "", key=f"{prefix}.email") or None,
        "password": st.text_input("Password", value=record.get("password", ""), type="password", key=f"{prefix}.password"),
        "notes": st.text_area("Notes", value=record.get("notes") or "", key=f"{prefix}.notes", height=68) or None,
    }


def _render_entry(client, entry):
    entry_id = entry["id"]
    revealed = session_slices.get_value(SLICE, f"reveal.{entry_id}", False)
    with st.container(border=True):
        cols = st.columns([4, 1, 1])
        cols[0].markdown(f"**{entry['siteName']}**  \n{entry.get('username') or entry.get('email') or ''}")
        if cols[1].button("Hide" if revealed else "Show", key=f"passwords.reveal.{entry_id}"):
            session_slices.toggle(SLICE, f"reveal.{entry_id}")
            st.rerun()
        if cols[2].button("Delete", key=f"passwords.delete.{entry_id}"):
            call_api(repositories.delete_password, client, entry_id, success="Password deleted")
            st.rerun()
        st.code(entry["password"] if revealed else "•" * 10, language=None)
        with st.expander("Edit"):
            with st.form(f"passwords.edit.{entry_id}"):
                patch = _password_fields(f"passwords.edit.{entry_id}", entry)
                if st.form_submit_button("Save") and patch["siteName"] and patch["password"]:
                    call_api(repositories.update_password, client, entry_id, patch, success="Password updated")
                    st.rerun()


def render_passwords_tab(ctx):
    client = ctx.client
    section_title("Passwords")
    st.caption("Stored as plain text.")
    with st.expander("Add password"):
        with st.form("passwords.create", clear_on_submit=True):
            payload = _password_fields("passwords.create")
            if st.form_submit_button("Add") and payload["siteName"] and payload["password"]:
                call_api(repositories.create_password, client, payload, success="Password added")
    for entry in call_api(repositories.list_passwords, client, default=[]):
        _render_entry(client, entry)
