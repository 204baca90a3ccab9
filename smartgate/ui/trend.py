import streamlit as st
import plotly.graph_objects as go

from smartgate.config import SERIES_COLORS, THEMES, VISUALIZATION_CONFIG

# Legend order
SERIES_ORDER = ['avg', 'minVal', 'maxVal', 'median', 'variance', 'standardDeviation', 'percentile']


def build_trend_figure(history, dark=True):
    """Line chart of every statistic against history point id"""
    theme = THEMES['dark' if dark else 'light']
    df = history.to_frame()

    fig = go.Figure()
    for field in SERIES_ORDER:
        fig.add_trace(go.Scatter(
            x=df['id'],
            y=df[field],
            mode='lines',
            name=field,
            line=dict(color=SERIES_COLORS[field], shape='spline')
        ))

    fig.update_layout(
        template=theme['chart_template'],
        height=VISUALIZATION_CONFIG['chart_height'],
        paper_bgcolor=theme['card_bg'],
        plot_bgcolor=theme['card_bg'],
        font=dict(color=theme['text']),
        hovermode='x unified',
        margin=dict(l=10, r=10, t=10, b=10),
        legend=dict(orientation='h', y=-0.15)
    )
    fig.update_xaxes(title_text='id', gridcolor=theme['grid'], griddash='dash')
    fig.update_yaxes(gridcolor=theme['grid'], griddash='dash')
    return fig


def trend_panel():
    """Output trend card"""
    theme = THEMES['dark' if st.session_state.dark else 'light']
    history = st.session_state.history

    col1, col2 = st.columns([3, 1])
    with col1:
        st.subheader("Output trend")
    with col2:
        st.markdown(
            f"<div style='text-align:right;color:{theme['muted']}'>{len(history)} points</div>",
            unsafe_allow_html=True
        )

    st.plotly_chart(build_trend_figure(history, st.session_state.dark), use_container_width=True)
