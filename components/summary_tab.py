"""Monthly summary tab: dues per player for a selected month."""

from datetime import date

import streamlit as st

from engine.costs import monthly_summary
from engine.months import available_months, month_label, parse_month_key, session_months
from engine.rounding import format_vnd
from utils.calculations import build_summary_frame, build_sessions_frame, summary_to_csv, summary_to_excel
from utils.visualizations import create_dues_chart, create_session_cost_chart


def summary_month_choices(sessions, today: date):
    keys = {k for k, _ in available_months(today)} | set(session_months(sessions))
    return sorted(keys, reverse=True)


def render_summary_tab(actions, today: date):
    choices = summary_month_choices(actions.sessions, today)
    current_key = available_months(today, ahead=0)[0][0]
    month_key = st.selectbox(
        "Month", choices, index=choices.index(current_key),
        format_func=month_label, key="summary_month",
    )
    title = month_label(month_key)
    year, month_index = parse_month_key(month_key)
    summary = monthly_summary(actions.sessions, actions.players, year, month_index)

    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Sessions", summary["session_count"], help=f"{summary['holiday_count']} marked holiday")
    c2.metric("Total Cost", format_vnd(summary["total_cost"]))
    c3.metric("Split Among Players", format_vnd(summary["distributed"]))
    c4.metric("Nobody Checked In", format_vnd(summary["unassigned_cost"]))

    if not summary["players"]:
        st.info(f"No costs recorded for {title}.")
        return

    summary_df = build_summary_frame(summary["players"])
    sessions_df = build_sessions_frame(summary["sessions"], actions.players)

    for row in summary["players"]:
        a, b = st.columns([3, 2])
        a.write(f"{row['name']} ({row['sessionsAttended']} sessions)")
        b.markdown(f"**{format_vnd(row['totalOwed'])}**")

    st.plotly_chart(create_dues_chart(summary_df, title), use_container_width=True)
    with st.expander("Session costs"):
        st.plotly_chart(create_session_cost_chart(sessions_df, title), use_container_width=True)
        st.dataframe(sessions_df, use_container_width=True, hide_index=True)

    d1, d2 = st.columns(2)
    with d1:
        st.download_button(
            "📥 Download CSV",
            data=summary_to_csv(summary_df),
            file_name=f"badminton_dues_{month_key}.csv",
            mime="text/csv",
        )
    with d2:
        st.download_button(
            "📥 Download Excel",
            data=summary_to_excel(summary_df, sessions_df, title),
            file_name=f"badminton_dues_{month_key}.xlsx",
            mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        )
