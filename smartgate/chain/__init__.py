"""SmartGate chain access"""

from .client import SmartGateClient, connect
from .decoder import GateResult, parse_receipt_event, coerce_value
from .deployer import DeploymentRecord, deploy_all, save_deployment, load_deployment
from .errors import SmartGateError, format_readable_error
from .operations import perform_gate_operation

__all__ = [
    'SmartGateClient', 'connect', 'GateResult', 'parse_receipt_event', 'coerce_value',
    'DeploymentRecord', 'deploy_all', 'save_deployment', 'load_deployment',
    'SmartGateError', 'format_readable_error', 'perform_gate_operation'
]
