"""
Gate operation flow shared by the dashboard and tests
"""

import logging

from smartgate.config import ERRORS
from smartgate.chain.errors import format_readable_error
from smartgate.utils.values import parse_values

logger = logging.getLogger(__name__)


def perform_gate_operation(client_factory, values_text, encryption_mode, advanced_mode):
    """
    Parse the dataset, submit it and return a displayable result

    Args:
        client_factory: callable returning a SmartGateClient
        values_text: comma separated values as typed by the user
        encryption_mode: encryption mode index
        advanced_mode: advanced analytics flag

    Returns:
        dict: result record, or {'error': message}
    """
    try:
        client = client_factory()
        numbers = parse_values(values_text)
        if not numbers:
            return {'error': ERRORS['no_values']}

        result = client.gate_operation(numbers, encryption_mode, advanced_mode)
        return result.to_record()
    except Exception as e:  # rendered in the result panel
        logger.exception("Gate operation failed")
        return {'error': format_readable_error(e)}
