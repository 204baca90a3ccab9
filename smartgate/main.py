import logging

import streamlit as st

from smartgate.config import APP_CONFIG, CHAIN_CONFIG, THEMES, configure_logging
from smartgate.chain.client import SmartGateClient
from smartgate.chain.errors import SmartGateError, format_readable_error
from smartgate.ui.gate_operations import gate_operations_panel
from smartgate.ui.trend import trend_panel
from smartgate.utils.client_store import ClientStateStore
from smartgate.utils.session_state import initialize_session_state, persist_session_state

logger = logging.getLogger(__name__)


@st.cache_resource
def get_store():
    configure_logging()
    logger.info("Opening client state at %s", APP_CONFIG['state_db'])
    return ClientStateStore(APP_CONFIG['state_db'])


def apply_theme(theme):
    st.markdown(f"""
    <style>
        .stApp {{
            background: {theme['bg']};
            color: {theme['text']};
            font-family: Inter, Arial, sans-serif;
        }}
        [data-testid="stVerticalBlockBorderWrapper"] {{
            background: {theme['card_bg']};
            border-radius: 12px;
        }}
        label, .stMarkdown p {{
            color: {theme['text']};
        }}
        [data-testid="stMetricLabel"] {{
            color: {theme['muted']};
        }}
    </style>
    """, unsafe_allow_html=True)


def render_sidebar():
    st.sidebar.title("🛡️ SmartGate")
    st.sidebar.markdown("---")
    st.sidebar.caption(f"RPC: {CHAIN_CONFIG['rpc_url']}")

    try:
        client = SmartGateClient.from_config()
        if client.is_connected():
            st.sidebar.success("✅ Node Connected")
        else:
            st.sidebar.error("❌ Node Offline")
        st.sidebar.caption(f"SmartGate: {client.address}")
    except SmartGateError as e:
        st.sidebar.error(format_readable_error(e))


def main():
    st.set_page_config(
        page_title=APP_CONFIG['page_title'],
        page_icon=APP_CONFIG['page_icon'],
        layout=APP_CONFIG['layout'],
        initial_sidebar_state="expanded"
    )

    store = get_store()
    initialize_session_state(store)
    apply_theme(THEMES['dark' if st.session_state.dark else 'light'])

    render_sidebar()

    left, right = st.columns([1, 2], gap="large")
    with left:
        with st.container(border=True):
            gate_operations_panel(store)
    with right:
        with st.container(border=True):
            trend_panel()

    persist_session_state(store)


if __name__ == "__main__":
    main()
