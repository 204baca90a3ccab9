"""
JSON-RPC client for the SmartGate contract
"""

import logging

from web3 import Web3
from web3.middleware import ExtraDataToPOAMiddleware

from smartgate.config import CHAIN_CONFIG, ERRORS
from smartgate.chain.artifacts import load_artifact
from smartgate.chain.decoder import GateResult, parse_receipt_event
from smartgate.chain.deployer import load_deployment
from smartgate.chain.errors import (
    EmptyDatasetError,
    MissingEventError,
    NodeConnectionError,
    TransactionRevertedError,
)

logger = logging.getLogger(__name__)


def connect(rpc_url, poa=False):
    """Open an HTTP provider and make sure the node answers"""
    w3 = Web3(Web3.HTTPProvider(rpc_url))
    if poa:
        w3.middleware_onion.inject(ExtraDataToPOAMiddleware, layer=0)
    if not w3.is_connected():
        raise NodeConnectionError(ERRORS['node_offline'].format(url=rpc_url))
    logger.info("Connected to %s (chain id %s)", rpc_url, w3.eth.chain_id)
    return w3


class SmartGateClient:
    """Submits datasets to SmartGate and decodes the result event"""

    def __init__(self, rpc_url, address, abi, account_index=0,
                 timeout=CHAIN_CONFIG['receipt_timeout'], poa=False, web3=None):
        self.rpc_url = rpc_url
        self.address = address
        self.abi = abi
        self.account_index = account_index
        self.timeout = timeout
        self.poa = poa
        self.w3 = web3
        self._contract = None

    @classmethod
    def from_config(cls, config=None):
        """Build a client from CHAIN_CONFIG, preferring a saved deployment address"""
        config = config or CHAIN_CONFIG
        artifact = load_artifact(config['artifacts_dir'], 'SmartGate')
        address = config['smartgate_address']
        record = load_deployment(config['deployment_file'])
        if record is not None:
            address = record.smart_gate
        return cls(
            config['rpc_url'],
            address,
            artifact['abi'],
            account_index=config['account_index'],
            timeout=config['receipt_timeout'],
            poa=config['poa'],
        )

    def connect(self):
        if self.w3 is None:
            self.w3 = connect(self.rpc_url, poa=self.poa)
        return self.w3

    def is_connected(self):
        try:
            return self.connect().is_connected()
        except NodeConnectionError:
            return False

    @property
    def signer(self):
        """Node-managed account used to send transactions"""
        accounts = self.connect().eth.accounts
        if len(accounts) <= self.account_index:
            raise NodeConnectionError(
                f"Node exposes {len(accounts)} accounts, index {self.account_index} unavailable"
            )
        return accounts[self.account_index]

    @property
    def contract(self):
        if self._contract is None:
            w3 = self.connect()
            self._contract = w3.eth.contract(
                address=Web3.to_checksum_address(self.address), abi=self.abi
            )
        return self._contract

    def gate_operation(self, numbers, encryption_mode, advanced_mode):
        """
        Run a gate operation and wait for its result

        Args:
            numbers: list of dataset values
            encryption_mode: mode index (see ENCRYPTION_MODES)
            advanced_mode: enable advanced analytics

        Returns:
            GateResult
        """
        if not numbers:
            raise EmptyDatasetError(ERRORS['no_values'])

        w3 = self.connect()
        logger.info(
            "gateOperation(%d values, mode=%s, advanced=%s)",
            len(numbers), encryption_mode, advanced_mode
        )
        tx_hash = self.contract.functions.gateOperation(
            list(numbers), int(encryption_mode), bool(advanced_mode)
        ).transact({'from': self.signer})

        receipt = w3.eth.wait_for_transaction_receipt(tx_hash, timeout=self.timeout)
        if receipt['status'] == 0:
            raise TransactionRevertedError(Web3.to_hex(tx_hash))
        logger.info("Transaction %s mined in block %s", Web3.to_hex(tx_hash), receipt['blockNumber'])

        args = parse_receipt_event(self.contract, receipt, CHAIN_CONFIG['event_name'])
        if args is None:
            raise MissingEventError(ERRORS['no_event'])
        return GateResult.from_event_args(args)
