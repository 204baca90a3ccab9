"""
Deployment of the Encryptor, StatsEngine and SmartGate contracts
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, ValidationError
from web3 import Web3

from smartgate.chain.artifacts import load_artifact
from smartgate.chain.errors import SmartGateError, TransactionRevertedError

logger = logging.getLogger(__name__)


class DeploymentRecord(BaseModel):
    """Addresses of a wired SmartGate deployment"""

    deployer: str
    encryptor: str
    stats_engine: str
    smart_gate: str
    chain_id: Optional[int] = None
    deployed_at: str = Field(default_factory=lambda: datetime.now().isoformat())


def _wait(w3, tx_hash, label):
    receipt = w3.eth.wait_for_transaction_receipt(tx_hash)
    if receipt['status'] == 0:
        raise TransactionRevertedError(Web3.to_hex(tx_hash), f"{label} transaction reverted")
    return receipt


def deploy_contract(w3, artifact, deployer):
    """Deploy one artifact and return its address"""
    factory = w3.eth.contract(abi=artifact['abi'], bytecode=artifact['bytecode'])
    tx_hash = factory.constructor().transact({'from': deployer})
    receipt = _wait(w3, tx_hash, artifact.get('contractName', 'deploy'))
    address = receipt['contractAddress']
    if not address:
        raise SmartGateError(f"No contract address in receipt {Web3.to_hex(tx_hash)}")
    return address


def deploy_all(w3, artifacts_dir, deployer):
    """
    Deploy the three contracts and point SmartGate at its modules

    Args:
        w3: connected Web3 instance
        artifacts_dir: Hardhat artifacts root
        deployer: sending account

    Returns:
        DeploymentRecord
    """
    logger.info("Deploying contracts with account: %s", deployer)

    encryptor_artifact = load_artifact(artifacts_dir, 'Encryptor', require_bytecode=True)
    stats_artifact = load_artifact(artifacts_dir, 'StatsEngine', require_bytecode=True)
    gate_artifact = load_artifact(artifacts_dir, 'SmartGate', require_bytecode=True)

    encryptor = deploy_contract(w3, encryptor_artifact, deployer)
    logger.info("Encryptor deployed at: %s", encryptor)

    stats_engine = deploy_contract(w3, stats_artifact, deployer)
    logger.info("StatsEngine deployed at: %s", stats_engine)

    smart_gate = deploy_contract(w3, gate_artifact, deployer)
    logger.info("SmartGate deployed at: %s", smart_gate)

    # Module addresses are set after deployment
    gate = w3.eth.contract(address=smart_gate, abi=gate_artifact['abi'])
    _wait(w3, gate.functions.setEncryptorAddress(encryptor).transact({'from': deployer}),
          'setEncryptorAddress')
    _wait(w3, gate.functions.setStatsEngineAddress(stats_engine).transact({'from': deployer}),
          'setStatsEngineAddress')

    logger.info("All contracts deployed and configured")
    return DeploymentRecord(
        deployer=deployer,
        encryptor=encryptor,
        stats_engine=stats_engine,
        smart_gate=smart_gate,
        chain_id=w3.eth.chain_id,
    )


def save_deployment(record, path):
    """Write the deployment record as JSON"""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open('w', encoding='utf-8') as f:
        json.dump(record.model_dump(), f, indent=2)
    logger.info("Deployment saved -> %s", path)
    return path


def load_deployment(path):
    """Read a deployment record, or None if there is none"""
    path = Path(path)
    if not path.exists():
        return None
    try:
        with path.open('r', encoding='utf-8') as f:
            return DeploymentRecord.model_validate(json.load(f))
    except (json.JSONDecodeError, ValidationError) as e:
        raise SmartGateError(f"Deployment record {path} is unreadable: {e}") from e
