"""Hardhat artifact loading"""

import json
from pathlib import Path

from smartgate.chain.errors import ArtifactError


def artifact_path(artifacts_dir, name):
    """Hardhat layout: <artifacts>/contracts/<Name>.sol/<Name>.json"""
    return Path(artifacts_dir) / 'contracts' / f'{name}.sol' / f'{name}.json'


def load_artifact(artifacts_dir, name, require_bytecode=False):
    """
    Load a compiled contract artifact

    Args:
        artifacts_dir: Hardhat artifacts root
        name: contract name
        require_bytecode: fail if the artifact carries no deployable bytecode

    Returns:
        dict: artifact with at least 'abi' (and 'bytecode' when required)
    """
    path = artifact_path(artifacts_dir, name)
    if not path.exists():
        raise ArtifactError(f"Artifact for {name} not found at {path}")

    try:
        with path.open('r', encoding='utf-8') as f:
            artifact = json.load(f)
    except json.JSONDecodeError as e:
        raise ArtifactError(f"Artifact {path} is not valid JSON: {e}") from e

    if not isinstance(artifact.get('abi'), list):
        raise ArtifactError(f"Artifact {path} has no ABI")

    bytecode = artifact.get('bytecode') or ''
    if require_bytecode and bytecode in ('', '0x'):
        raise ArtifactError(f"Artifact {path} has no bytecode (is {name} abstract?)")

    return artifact
