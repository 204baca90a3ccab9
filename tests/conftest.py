"""Pytest fixtures and chain/Streamlit test doubles.

No test talks to a node: the web3 surface used by the client and deployer is
replaced by ``FakeWeb3``, and Streamlit's session state by ``FakeSessionState``.
"""

from __future__ import annotations

import json
from types import SimpleNamespace

import pytest
from web3.exceptions import MismatchedABI

from smartgate.config import RESULT_FIELDS

ACCOUNT = "0x90F8bf6A479f320ead074411a4B0e7944Ea8c9C1"
GATE_ADDRESS = "0xfcDB4564c18A9134002b9771816092C9693622e3"


# =============================================================================
# Streamlit
# =============================================================================


class FakeSessionState(dict):
    """Dict with attribute access, like ``st.session_state``."""

    def __getattr__(self, name):
        try:
            return self[name]
        except KeyError as e:
            raise AttributeError(name) from e

    def __setattr__(self, name, value):
        self[name] = value

    def __delattr__(self, name):
        del self[name]


@pytest.fixture
def session_state(monkeypatch):
    from smartgate.utils import session_state as module

    state = FakeSessionState()
    monkeypatch.setattr(module, "st", SimpleNamespace(session_state=state))
    return state


# =============================================================================
# web3
# =============================================================================


class FakeEventDecoder:
    """Stands in for ``contract.events.GateOperationResult()``."""

    def process_log(self, log):
        if log.get("event") != "GateOperationResult":
            raise MismatchedABI("topic mismatch")
        return {"event": log["event"], "args": log["args"]}


class FakeCall:
    def __init__(self, eth, key, receipt):
        self.eth = eth
        self.key = key
        self.receipt = receipt

    def transact(self, tx):
        self.eth.calls.append((self.key, tx))
        return self.eth.new_tx(dict(self.receipt))


class FakeFunctions:
    def __init__(self, contract):
        self._contract = contract

    def __getattr__(self, name):
        eth = self._contract.eth

        def build(*args):
            return FakeCall(eth, (self._contract.address, name, args), eth.function_receipts.get(name, {}))

        return build


class FakeContract:
    def __init__(self, eth, address=None, abi=None, bytecode=None):
        self.eth = eth
        self.address = address
        self.abi = abi
        self.bytecode = bytecode
        self.functions = FakeFunctions(self)
        self.events = SimpleNamespace(GateOperationResult=FakeEventDecoder)

    def constructor(self):
        address = "0x" + f"{len(self.eth.deployed) + 1:040x}"
        self.eth.deployed.append((self.bytecode, address))
        return FakeCall(self.eth, ("constructor", self.bytecode), {"contractAddress": address})


class FakeEth:
    def __init__(self, accounts=None, chain_id=31337):
        self.accounts = [ACCOUNT] if accounts is None else accounts
        self.chain_id = chain_id
        self.receipts = {}
        self.calls = []
        self.deployed = []
        self.function_receipts = {}
        self._counter = 0

    def new_tx(self, receipt):
        self._counter += 1
        tx_hash = self._counter.to_bytes(32, "big")
        self.receipts[tx_hash] = {
            "status": 1,
            "blockNumber": self._counter,
            "transactionHash": tx_hash,
            "logs": [],
            **receipt,
        }
        return tx_hash

    def contract(self, address=None, abi=None, bytecode=None):
        return FakeContract(self, address, abi, bytecode)

    def wait_for_transaction_receipt(self, tx_hash, timeout=120, poll_latency=0.1):
        return self.receipts[tx_hash]


class FakeWeb3:
    def __init__(self, eth=None, connected=True):
        self.eth = eth or FakeEth()
        self.connected = connected

    def is_connected(self):
        return self.connected


class RecordingClient:
    """SmartGateClient stand-in that records calls and returns or raises ``outcome``."""

    def __init__(self, outcome):
        self.outcome = outcome
        self.calls = []

    def gate_operation(self, numbers, encryption_mode, advanced_mode):
        self.calls.append((numbers, encryption_mode, advanced_mode))
        if isinstance(self.outcome, Exception):
            raise self.outcome
        return self.outcome


def gate_log(values):
    """Raw-log stand-in carrying a GateOperationResult."""
    return {"event": "GateOperationResult", "args": dict(zip(RESULT_FIELDS, values))}


@pytest.fixture
def fake_w3():
    return FakeWeb3()


# =============================================================================
# Artifacts
# =============================================================================


def write_artifact(root, name, abi=None, bytecode="0x6080604052"):
    path = root / "contracts" / f"{name}.sol" / f"{name}.json"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps({"contractName": name, "abi": abi or [], "bytecode": bytecode}))
    return path


@pytest.fixture
def artifacts_dir(tmp_path):
    root = tmp_path / "artifacts"
    for name in ("Encryptor", "StatsEngine", "SmartGate"):
        write_artifact(root, name)
    return root
