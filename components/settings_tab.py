"""Monthly settings tab: budget inputs and Mon/Wed session generation."""

from datetime import date

import streamlit as st

from config.default_params import SETTINGS_FORM_DEFAULTS
from engine.generator import get_settings
from engine.models import MonthlySettings
from engine.months import available_months, month_label, parse_month_key
from engine.rounding import coerce_amount, format_vnd
from engine.schedule import calculate_schedule
from components.actions import flash


def render_schedule_preview(month_key, month_settings, sessions):
    year, month_index = parse_month_key(month_key)
    res = calculate_schedule(
        year, month_index, sessions,
        month_settings.monthly_court_fee, month_settings.monthly_shuttlecock_price,
        month_settings.session_water_price,
    )
    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Sessions", res["total_sessions"], help=f"{res['mondays']} Mon + {res['wednesdays']} Wed")
    c2.metric("Court / session", format_vnd(res["court_price"]))
    c3.metric("Shuttlecock Mon", format_vnd(res["shuttlecock_price"][0]))
    c4.metric("Shuttlecock Wed", format_vnd(res["shuttlecock_price"][2]))
    if res["total_sessions"] == 0:
        st.info("No qualifying Mondays or Wednesdays left in this month.")
    elif res["overage"] > 0:
        st.caption(f"Rounding up allocates {format_vnd(res['overage'])} above the monthly budget.")


def render_settings_tab(actions, today: date):
    months = available_months(today)
    keys = [k for k, _ in months]
    month_key = st.selectbox("Month", keys, format_func=month_label, key="settings_month")

    current = get_settings(actions.settings, month_key)
    if current is not None:
        st.markdown(f"#### Current settings - {month_label(month_key)}")
        c1, c2, c3 = st.columns(3)
        c1.metric("Monthly Court Fee", format_vnd(current.monthly_court_fee))
        c2.metric("Monthly Shuttlecock", format_vnd(current.monthly_shuttlecock_price))
        c3.metric("Session Water", format_vnd(current.session_water_price))
        render_schedule_preview(month_key, current, actions.sessions)
    else:
        st.warning(f"⚠️ No settings saved for {month_label(month_key)} yet.")

    with st.form(f"settings_form_{month_key}"):
        st.markdown(f"#### Monthly Settings - {month_label(month_key)}")
        court_fee = st.text_input(
            "Monthly Court Fee (VND)",
            value=f"{current.monthly_court_fee:.0f}" if current else "",
            placeholder=f"e.g., {SETTINGS_FORM_DEFAULTS['monthly_court_fee']}",
        )
        shuttle = st.text_input(
            "Monthly Shuttlecock Price (VND)",
            value=f"{current.monthly_shuttlecock_price:.0f}" if current else "",
            placeholder=f"e.g., {SETTINGS_FORM_DEFAULTS['monthly_shuttlecock_price']}",
        )
        water = st.text_input(
            "Session Water Price (VND per session)",
            value=f"{current.session_water_price:.0f}" if current else "",
            placeholder=f"e.g., {SETTINGS_FORM_DEFAULTS['session_water_price']}",
        )
        st.caption(f"Saving will auto-generate sessions for all Mondays and Wednesdays in {month_label(month_key)}. "
                   "Existing sessions keep their check-ins and holiday flags; only prices are updated.")
        submitted = st.form_submit_button("Save & Generate Sessions", type="primary")

    if submitted:
        new_settings = MonthlySettings(
            month_key=month_key,
            monthly_court_fee=coerce_amount(court_fee),
            monthly_shuttlecock_price=coerce_amount(shuttle),
            session_water_price=coerce_amount(water),
        )
        created = actions.save_settings_and_generate(new_settings)
        if created is not None:
            flash("success", f"✅ Settings saved for {month_label(month_key)}; {created} new sessions created")
        st.rerun()
