import streamlit as st

from planner_dashboard.constants import HEALTH_DIMENSIONS, MONTH_NAMES
from planner_dashboard.data import repositories
from planner_dashboard.metrics import health_dimensions, health_label, overall_health_score
from planner_dashboard.tabs.common import call_api, section_title


def _render_score_form(client, current, month, year):
    defaults = current or {}
    with st.form(f"health.form.{month}.{year}"):
        values = {}
        for field, label in HEALTH_DIMENSIONS:
            values[field] = st.slider(label, 1, 10, int(defaults.get(field) or 5), key=f"health.{field}.{month}.{year}")
        notes = st.text_area("Notes", value=defaults.get("notes") or "", key=f"health.notes.{month}.{year}")
        if not st.form_submit_button("Update score" if current else "Save score"):
            return
    payload = {"month": month, "year": year, **values, "notes": notes or None}
    if current:
        call_api(repositories.update_health_score, client, current["id"], payload, success="Health score updated")
    else:
        call_api(repositories.create_health_score, client, payload, success="Health score saved")
    st.rerun()


def render_health_tab(ctx):
    client = ctx.client
    section_title("Health")
    today = ctx.today
    cols = st.columns(2)
    month = cols[0].selectbox("Month", range(1, 13), index=today.month - 1, format_func=lambda m: MONTH_NAMES[m - 1], key="health.month")
    year = int(cols[1].number_input("Year", min_value=2000, max_value=2100, value=today.year, key="health.year"))

    current = call_api(repositories.get_health_score, client, month, year)
    if current:
        overall = overall_health_score(current)
        st.metric(f"{MONTH_NAMES[month - 1]} {year}", f"{overall}/10")
        st.caption(health_label(overall))
        for label, value in health_dimensions(current):
            st.progress(value / 10, text=f"{label}: {value}")
    else:
        st.info(f"No score for {MONTH_NAMES[month - 1]} {year} yet.")

    _render_score_form(client, current, month, year)

    history = call_api(repositories.list_health_scores, client, default=[])
    if history:
        st.markdown("**History**")
        st.dataframe(
            [
                {"month": f"{score['year']}-{score['month']:02d}", "overall": overall_health_score(score)}
                for score in sorted(history, key=lambda s: (s["year"], s["month"]))
            ],
            hide_index=True,
        )
