"""Utility modules for the SmartGate dashboard"""

from .client_store import ClientStateStore
from .history import HistoryStore
from .session_state import initialize_session_state, persist_session_state, push_history, clear_history
from .values import parse_values

__all__ = [
    'ClientStateStore', 'HistoryStore', 'initialize_session_state', 'persist_session_state',
    'push_history', 'clear_history', 'parse_values'
]
