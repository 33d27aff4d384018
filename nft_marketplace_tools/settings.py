import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

# Blocks to wait after inclusion before a deployment is treated as final
NETWORK_CONFIG = {
    "mainnet": {"block_confirmations": 6},
    "sepolia": {"block_confirmations": 6},
    "goerli": {"block_confirmations": 6},
}
DEFAULT_BLOCK_CONFIRMATIONS = 1

FRONT_END_CONTRACTS_FILE = "../frontend-moralis/constants/networkMapping.json"

_FALSE_VALUES = ("", "0", "false", "no", "off")


def is_enabled(value) -> bool:
    """Env flags are on for any non-empty value except 0/false/no/off."""
    if value is None:
        return False
    return value.strip().lower() not in _FALSE_VALUES


def is_development_network(network) -> bool:
    """Local chains and forks (ape's NetworkAPI.is_dev)."""
    return bool(network.is_dev)


def _parse_confirmations(value):
    if value is None or value.strip() == "":
        return None
    try:
        confirmations = int(value)
    except ValueError:
        raise ValueError(f"BLOCK_CONFIRMATIONS must be an integer, got {value!r}")
    if confirmations < 0:
        raise ValueError(f"BLOCK_CONFIRMATIONS must not be negative, got {confirmations}")
    return confirmations


@dataclass
class Settings:
    etherscan_api_key: Optional[str] = None
    update_front_end: bool = False
    front_end_contracts_file: str = FRONT_END_CONTRACTS_FILE
    block_confirmations: Optional[int] = None
    deployer_alias: Optional[str] = None
    deployer_passphrase: Optional[str] = None

    def confirmations_for(self, network) -> int:
        if self.block_confirmations is not None:
            return self.block_confirmations
        if is_development_network(network):
            return 0
        config = NETWORK_CONFIG.get(network.name, {})
        return config.get("block_confirmations", DEFAULT_BLOCK_CONFIRMATIONS)


def load_settings(env=None, dotenv_path=None) -> Settings:
    """
    Build Settings from the environment.
    When `env` is not given the process environment is used, after loading
    `.env` (variables already set are kept).
    """
    if env is None:
        load_dotenv(dotenv_path=dotenv_path, override=False)
        env = os.environ

    return Settings(
        etherscan_api_key=env.get("ETHERSCAN_API_KEY") or None,
        update_front_end=is_enabled(env.get("UPDATE_FRONT_END")),
        front_end_contracts_file=env.get("FRONT_END_CONTRACTS_FILE") or FRONT_END_CONTRACTS_FILE,
        block_confirmations=_parse_confirmations(env.get("BLOCK_CONFIRMATIONS")),
        deployer_alias=env.get("DEPLOYER_ACCOUNT") or None,
        deployer_passphrase=env.get("DEPLOYER_PASSPHRASE") or None,
    )
