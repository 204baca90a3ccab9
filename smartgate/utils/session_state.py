import json
import logging

import streamlit as st

from smartgate.config import DEFAULT_ENCRYPTION_MODE, ENCRYPTION_MODES, STORAGE_KEYS
from smartgate.utils.history import HistoryStore

logger = logging.getLogger(__name__)


def _restore_bool(raw):
    return raw == 'true'


def _restore_mode(raw):
    mode = int(raw)
    if mode not in ENCRYPTION_MODES:
        raise ValueError(f"unknown encryption mode {mode}")
    return mode


def _restore_history(raw):
    return HistoryStore.from_list(json.loads(raw))


def _restore_result(raw):
    result = json.loads(raw)
    if result is not None and not isinstance(result, dict):
        raise ValueError("last result must be an object")
    return result


# session key -> (storage key, decoder)
_RESTORERS = {
    'values_text': (STORAGE_KEYS['values'], str),
    'encryption_mode': (STORAGE_KEYS['encryption_mode'], _restore_mode),
    'advanced_mode': (STORAGE_KEYS['advanced'], _restore_bool),
    'dark': (STORAGE_KEYS['dark'], _restore_bool),
    'history': (STORAGE_KEYS['history'], _restore_history),
    'result': (STORAGE_KEYS['last_result'], _restore_result),
}


def initialize_session_state(store):
    """Initialize session state variables, restoring persisted ones from the store"""
    if st.session_state.get('initialized'):
        return

    defaults = {
        'values_text': '',
        'encryption_mode': DEFAULT_ENCRYPTION_MODE,
        'advanced_mode': False,
        'dark': True,
        'result': None,
        'history': HistoryStore(),
    }
    for k, v in defaults.items():
        if k not in st.session_state:
            st.session_state[k] = v

    for session_key, (storage_key, decode) in _RESTORERS.items():
        raw = store.get_item(storage_key)
        if not raw:
            continue
        try:
            st.session_state[session_key] = decode(raw)
        except (ValueError, TypeError) as e:
            logger.warning("Ignoring corrupt %s: %s", storage_key, e)

    st.session_state['initialized'] = True


def persist_session_state(store):
    """Write persisted session values back to the store"""
    store.set_item(STORAGE_KEYS['values'], st.session_state['values_text'])
    store.set_item(STORAGE_KEYS['encryption_mode'], str(st.session_state['encryption_mode']))
    store.set_item(STORAGE_KEYS['advanced'], 'true' if st.session_state['advanced_mode'] else 'false')
    store.set_item(STORAGE_KEYS['dark'], 'true' if st.session_state['dark'] else 'false')
    store.set_json(STORAGE_KEYS['history'], st.session_state['history'].to_list())
    store.set_json(STORAGE_KEYS['last_result'], st.session_state['result'])


def push_history(result):
    """Append a successful result to the bounded history"""
    return st.session_state['history'].append(result)


def clear_history(store):
    """Empty the history and drop its persisted copy"""
    st.session_state['history'].clear()
    store.remove_item(STORAGE_KEYS['history'])

