import streamlit as st

from smartgate.config import ENCRYPTION_MODES, THEMES
from smartgate.chain.client import SmartGateClient
from smartgate.chain.operations import perform_gate_operation
from smartgate.utils.session_state import clear_history, push_history


def gate_operations_panel(store, client_factory=SmartGateClient.from_config):
    """Input card: dataset, encryption mode, analytics flag and the latest result"""
    theme = THEMES['dark' if st.session_state.dark else 'light']

    col1, col2, col3 = st.columns([3, 1, 1])
    with col1:
        st.subheader("SmartGate")
    with col2:
        if st.button("Dark" if st.session_state.dark else "Light", help="Toggle theme",
                     use_container_width=True):
            st.session_state.dark = not st.session_state.dark
            st.rerun()
    with col3:
        if st.button("Clear", help="Clear local history", use_container_width=True):
            clear_history(store)

    st.text_input("Values", key="values_text", placeholder="eg. 10,20,30")

    st.selectbox(
        "Encryption mode",
        options=list(ENCRYPTION_MODES),
        format_func=lambda mode: ENCRYPTION_MODES[mode],
        key="encryption_mode"
    )

    st.checkbox("Advanced analytics", key="advanced_mode")

    if st.button("Run Gate Operation", type="primary", use_container_width=True):
        run_gate_operation(client_factory)

    if st.session_state.result:
        display_result(theme)


def run_gate_operation(client_factory):
    """Submit the current inputs and record the outcome"""
    st.session_state.result = None
    with st.spinner("Processing..."):
        result = perform_gate_operation(
            client_factory,
            st.session_state.values_text,
            st.session_state.encryption_mode,
            st.session_state.advanced_mode
        )
    st.session_state.result = result
    if 'error' not in result:
        push_history(result)


def display_result(theme):
    result = st.session_state.result

    if 'error' in result:
        st.error(f"**Error**\n\n{result['error']}")
        return

    col1, col2 = st.columns(2)
    with col1:
        st.markdown("**Latest result**")
    with col2:
        st.markdown(
            f"<div style='text-align:right;color:{theme['muted']}'>"
            f"{len(st.session_state.history)} points</div>",
            unsafe_allow_html=True
        )

    items = list(result.items())
    for i in range(0, len(items), 2):
        cols = st.columns(2)
        for col, (name, value) in zip(cols, items[i:i + 2]):
            with col:
                st.metric(name, str(value))
