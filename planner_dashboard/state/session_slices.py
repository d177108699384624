import streamlit as st


PREFIX = "planner"


def _key(slice_name):
    return f"{PREFIX}.{slice_name}"


def get_slice(slice_name):
    key = _key(slice_name)
    if key not in st.session_state:
        st.session_state[key] = {}
    return st.session_state[key]


def get_value(slice_name, name, default=None):
    return get_slice(slice_name).get(name, default)


def set_value(slice_name, name, value):
    get_slice(slice_name)[name] = value


def toggle(slice_name, name):
    payload = get_slice(slice_name)
    payload[name] = not payload.get(name, False)
    return payload[name]


def get_query_client(factory):
    """One QueryClient per browser session, built on first use."""
    key = _key("query_client")
    if key not in st.session_state:
        st.session_state[key] = factory()
    return st.session_state[key]


def clear_slice(slice_name):
    key = _key(slice_name)
    if key in st.session_state:
        del st.session_state[key]
