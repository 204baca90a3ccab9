"""
Configuration settings for the SmartGate dashboard
"""

import logging
import os
import sys
from pathlib import Path


def _env_flag(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


# Application Configuration
APP_CONFIG = {
    'page_title': 'SmartGate',
    'page_icon': '🛡️',
    'layout': 'wide',
    'log_file': os.environ.get('SMARTGATE_LOG_FILE', 'smartgate.log'),
    'state_db': os.environ.get(
        'SMARTGATE_STATE_DB',
        str(Path.home() / '.smartgate' / 'client_state.db')
    )
}

# Blockchain Configuration
CHAIN_CONFIG = {
    'rpc_url': os.environ.get('SMARTGATE_RPC_URL', 'http://127.0.0.1:8545'),
    'smartgate_address': os.environ.get(
        'SMARTGATE_ADDRESS', '0xfcDB4564c18A9134002b9771816092C9693622e3'
    ),
    'artifacts_dir': os.environ.get('SMARTGATE_ARTIFACTS_DIR', 'artifacts'),
    'deployment_file': os.environ.get('SMARTGATE_DEPLOYMENT_FILE', 'deployments/smartgate.json'),
    'account_index': int(os.environ.get('SMARTGATE_ACCOUNT_INDEX', '0')),
    'receipt_timeout': 120,
    'poa': _env_flag('SMARTGATE_POA'),
    'event_name': 'GateOperationResult',
    'contracts': ['Encryptor', 'StatsEngine', 'SmartGate']
}

# Client-side persisted state keys
STORAGE_KEYS = {
    'history': 'smartgate_history_v1',
    'last_result': 'smartgate_last_result_v1',
    'values': 'smartgate_values_v1',
    'encryption_mode': 'smartgate_encryption_mode_v1',
    'advanced': 'smartgate_advanced_v1',
    'dark': 'smartgate_dark_v1'
}

HISTORY_CONFIG = {
    'capacity': 200
}

# Encryption modes understood by SmartGate
ENCRYPTION_MODES = {
    0: 'None',
    1: 'KECCAK256',
    2: 'SHA256',
    3: 'RIPEMD160'
}

DEFAULT_ENCRYPTION_MODE = 1

# GateOperationResult fields, in event order
RESULT_FIELDS = [
    'avg',
    'minVal',
    'maxVal',
    'variance',
    'median',
    'standardDeviation',
    'percentile'
]

SERIES_COLORS = {
    'avg': '#4a6cff',
    'minVal': '#2ecc71',
    'maxVal': '#e74c3c',
    'median': '#9b59b6',
    'variance': '#f1c40f',
    'standardDeviation': '#1abc9c',
    'percentile': '#e67e22'
}

# Visualization Settings
THEMES = {
    'dark': {
        'bg': '#0f1724',
        'card_bg': '#0b1220',
        'text': '#e6eef8',
        'muted': '#9fb0c9',
        'grid': '#0b1930',
        'accent': '#4a6cff',
        'chart_template': 'plotly_dark'
    },
    'light': {
        'bg': '#f4f5f7',
        'card_bg': '#ffffff',
        'text': '#0b1220',
        'muted': '#6b7280',
        'grid': '#f0f0f0',
        'accent': '#4a6cff',
        'chart_template': 'plotly_white'
    }
}

VISUALIZATION_CONFIG = {
    'chart_height': 560
}

# Error Messages
ERRORS = {
    'no_values': 'Please enter at least one numeric value.',
    'no_event': 'No GateOperationResult event found.',
    'unknown': 'Unknown error',
    'node_offline': 'Cannot connect to the JSON-RPC node at {url}'
}


def configure_logging(level=logging.INFO, log_file=None):
    """Configure root logging with file and stdout handlers"""
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.FileHandler(log_file or APP_CONFIG['log_file']),
            logging.StreamHandler(sys.stdout)
        ]
    )
