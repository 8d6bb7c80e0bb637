"""Charts for the monthly summary."""

import plotly.graph_objects as go


def create_dues_chart(summary_df, month_title):
    """Horizontal bar chart of what each player owes."""
    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=summary_df['Total Owed (rounded)'],
        y=summary_df['Player'],
        orientation='h',
        marker_color='#22d3ee',
        text=[f"{v:,.0f}" for v in summary_df['Total Owed (rounded)']],
        textposition='auto'
    ))
    fig.update_layout(
        title=f'Dues per Player - {month_title}',
        xaxis_title='Amount (VND)',
        yaxis=dict(autorange='reversed'),
        height=max(250, 40 * len(summary_df) + 120)
    )
    return fig


def create_session_cost_chart(sessions_df, month_title):
    """Stacked cost components per session date."""
    fig = go.Figure()
    colors = {
        'Court': '#0891b2',
        'Shuttlecock': '#22d3ee',
        'Water': '#a5f3fc',
        'Drink': '#f59e0b',
    }
    dates = [d.isoformat() for d in sessions_df['Date']]
    for column, color in colors.items():
        fig.add_trace(go.Bar(
            x=dates,
            y=sessions_df[column],
            name=column,
            marker_color=color
        ))
    fig.update_layout(
        barmode='stack',
        title=f'Session Costs - {month_title}',
        xaxis_title='Date',
        yaxis_title='Cost (VND)',
        height=400
    )
    return fig
