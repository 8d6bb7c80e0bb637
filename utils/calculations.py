"""Tabular views of sessions and monthly dues, and their CSV/Excel exports."""

from io import BytesIO

import pandas as pd

from engine.costs import session_total_cost, cost_per_player
from engine.rounding import round_up_to_thousand

SUMMARY_COLUMNS = ['Player', 'Sessions', 'Total Owed', 'Total Owed (rounded)']
SESSION_COLUMNS = [
    'Date', 'Weekday', 'Holiday', 'Court', 'Shuttlecock', 'Water', 'Drink',
    'Total', 'Players', 'Per Player',
]


def build_summary_frame(summary_rows):
    """DataFrame of per-player dues, in the order produced by the aggregator."""
    rows = [
        {
            'Player': r['name'],
            'Sessions': r['sessionsAttended'],
            'Total Owed': r['totalOwed'],
            'Total Owed (rounded)': round_up_to_thousand(r['totalOwed']),
        }
        for r in summary_rows
    ]
    return pd.DataFrame(rows, columns=SUMMARY_COLUMNS)


def build_sessions_frame(sessions, players):
    names = {p.id: p.name for p in players}
    rows = []
    for s in sorted(sessions, key=lambda x: x.date):
        rows.append({
            'Date': s.date,
            'Weekday': s.date.strftime('%A'),
            'Holiday': s.is_holiday,
            'Court': s.court_price,
            'Shuttlecock': s.shuttlecock_price,
            'Water': s.water_price,
            'Drink': s.drink_price,
            'Total': session_total_cost(s),
            'Players': ', '.join(names.get(pid, '?') for pid in s.player_ids),
            'Per Player': cost_per_player(s),
        })
    return pd.DataFrame(rows, columns=SESSION_COLUMNS)


def summary_to_csv(summary_df):
    return summary_df.to_csv(index=False).encode('utf-8')


def summary_to_excel(summary_df, sessions_df, month_title):
    """Two-sheet workbook: dues per player and the month's sessions."""
    bio = BytesIO()
    with pd.ExcelWriter(bio, engine='xlsxwriter') as writer:
        summary_df.to_excel(writer, sheet_name='Dues', index=False, startrow=2)
        sessions_df.to_excel(writer, sheet_name='Sessions', index=False, startrow=2)

        workbook = writer.book
        title_format = workbook.add_format({'bold': True, 'font_size': 14})
        money_format = workbook.add_format({'num_format': '#,##0'})

        dues = writer.sheets['Dues']
        dues.write(0, 0, f"Monthly dues - {month_title}", title_format)
        dues.set_column(0, 0, 24)
        dues.set_column(1, 1, 10)
        dues.set_column(2, 3, 18, money_format)

        sess = writer.sheets['Sessions']
        sess.write(0, 0, f"Sessions - {month_title}", title_format)
        sess.set_column(0, 2, 12)
        sess.set_column(3, 7, 14, money_format)
        sess.set_column(8, 8, 40)
        sess.set_column(9, 9, 14, money_format)
    return bio.getvalue()
