"""
Decoding of GateOperationResult events out of transaction receipts
"""

import logging
import math
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from web3.exceptions import LogTopicError, MismatchedABI
from eth_abi.exceptions import DecodingError

from smartgate.config import CHAIN_CONFIG, RESULT_FIELDS

logger = logging.getLogger(__name__)

Statistic = Optional[Union[int, float, str]]

_LOG_DECODE_ERRORS = (MismatchedABI, LogTopicError, DecodingError, ValueError, KeyError)


def _field(receipt, name, default=None):
    if hasattr(receipt, 'get'):
        return receipt.get(name, default)
    return getattr(receipt, name, default)


def parse_receipt_event(contract, receipt, event_name=CHAIN_CONFIG['event_name']):
    """
    Extract the args of a named event from a transaction receipt

    The first pre-parsed ``events`` entry with a matching name is preferred.
    When there is none, or it carries no args, every raw log is decoded against the contract ABI and the first match
    wins. Logs emitted by other contracts or events are skipped.

    Args:
        contract: web3 contract carrying the event ABI
        receipt: transaction receipt (AttributeDict or dict)
        event_name: name of the event to look for

    Returns:
        event args mapping, or None if the event is absent
    """
    events = _field(receipt, 'events') or []
    event = next((e for e in events if _field(e, 'event') == event_name), None)
    if event is not None and _field(event, 'args'):
        return _field(event, 'args')

    event_type = getattr(contract.events, event_name)
    for log in _field(receipt, 'logs') or []:
        try:
            parsed = event_type().process_log(log)
        except _LOG_DECODE_ERRORS:
            continue
        if parsed and parsed['event'] == event_name:
            return parsed['args']

    logger.warning("No %s event in receipt %s", event_name, _field(receipt, 'transactionHash'))
    return None


def coerce_value(value):
    """Coerce a decoded event value to a number where it reads as one"""
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else str(value)
    if isinstance(value, (bytes, bytearray)):
        return '0x' + bytes(value).hex()

    text = str(value).strip()
    try:
        return int(text)
    except ValueError:
        pass
    try:
        number = float(text)
    except ValueError:
        return text
    return number if math.isfinite(number) else text


class GateResult(BaseModel):
    """Statistics returned by a gate operation"""

    model_config = ConfigDict(populate_by_name=True)

    avg: Statistic = None
    min_val: Statistic = Field(default=None, alias='minVal')
    max_val: Statistic = Field(default=None, alias='maxVal')
    variance: Statistic = None
    median: Statistic = None
    standard_deviation: Statistic = Field(default=None, alias='standardDeviation')
    percentile: Statistic = None

    @classmethod
    def from_event_args(cls, args: Any) -> 'GateResult':
        """Build a result from event args, positionally in event order"""
        values = list(args.values()) if hasattr(args, 'values') else list(args)
        parsed = [coerce_value(v) for v in values]
        return cls(**dict(zip(RESULT_FIELDS, parsed)))

    def to_record(self) -> dict:
        """Serialise with the storage field names"""
        return self.model_dump(by_alias=True)
