"""
Deploy Encryptor, StatsEngine and SmartGate and wire them together

Usage:
    smartgate-deploy --rpc-url http://127.0.0.1:8545 --artifacts artifacts
"""

import argparse
import logging
import sys
from pathlib import Path

from smartgate.config import CHAIN_CONFIG, configure_logging
from smartgate.chain.client import connect
from smartgate.chain.deployer import deploy_all, save_deployment
from smartgate.chain.errors import SmartGateError, format_readable_error

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(description="Deploy the SmartGate contracts")
    parser.add_argument("--rpc-url", default=CHAIN_CONFIG['rpc_url'], help="JSON-RPC endpoint")
    parser.add_argument("--artifacts", type=Path, default=Path(CHAIN_CONFIG['artifacts_dir']),
                        help="Hardhat artifacts directory")
    parser.add_argument("--account-index", type=int, default=CHAIN_CONFIG['account_index'],
                        help="Index of the node-managed deployer account")
    parser.add_argument("--out", type=Path, default=Path(CHAIN_CONFIG['deployment_file']),
                        help="Where to write the deployment record")
    parser.add_argument("--poa", action="store_true", default=CHAIN_CONFIG['poa'],
                        help="Inject proof-of-authority extra-data middleware")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    configure_logging()

    try:
        w3 = connect(args.rpc_url, poa=args.poa)
        accounts = w3.eth.accounts
        if len(accounts) <= args.account_index:
            raise SmartGateError(f"No account at index {args.account_index}")
        record = deploy_all(w3, args.artifacts, accounts[args.account_index])
        save_deployment(record, args.out)
    except Exception as e:
        logger.error("Deployment failed: %s", format_readable_error(e))
        return 1

    print(f"SmartGate: {record.smart_gate}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
