"""
Exceptions raised by the chain layer and helpers to render them for users
"""

import json

from web3.exceptions import ContractLogicError

from smartgate.config import ERRORS

REVERT_PREFIX = 'execution reverted: '


class SmartGateError(Exception):
    """Base class for SmartGate client errors"""


class NodeConnectionError(SmartGateError):
    """The JSON-RPC node could not be reached"""


class ArtifactError(SmartGateError):
    """A contract artifact is missing or malformed"""


class EmptyDatasetError(SmartGateError):
    """No numeric values were supplied"""


class TransactionRevertedError(SmartGateError):
    """A mined transaction reported a failed status"""

    def __init__(self, tx_hash, message=None):
        self.tx_hash = tx_hash
        super().__init__(message or f"Transaction {tx_hash} reverted")


class MissingEventError(SmartGateError):
    """The receipt did not carry the expected event"""


def _revert_reason(err):
    message = err.message if getattr(err, 'message', None) else str(err)
    if message.startswith(REVERT_PREFIX):
        return message[len(REVERT_PREFIX):]
    return message


def format_readable_error(err):
    """
    Turn any error raised while talking to the node into a short message

    Args:
        err: exception, string or None

    Returns:
        str: message suitable for display
    """
    if err is None:
        return ERRORS['unknown']
    if isinstance(err, str):
        return err
    if isinstance(err, ContractLogicError):
        return _revert_reason(err)
    if getattr(err, 'reason', None):
        return str(err.reason)
    if getattr(err, 'message', None):
        return str(err.message)

    # JSON-RPC errors arrive as a dict payload
    args = getattr(err, 'args', ())
    if args and isinstance(args[0], dict) and args[0].get('message'):
        return str(args[0]['message'])

    text = str(err)
    if text:
        return text
    return json.dumps(getattr(err, '__dict__', {}) or repr(err), default=str)
