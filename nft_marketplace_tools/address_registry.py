# file: address_registry.py
# Front-end address registry: {network id: {contract name: [address, ...]}}
import json

MARKETPLACE_CONTRACT = "NftMarketplace"


def _check_entry(network_id, address):
    if not network_id:
        raise ValueError("Network id cannot be empty")
    if not address:
        raise ValueError("Contract address cannot be empty")


def merge_address(registry, network_id, address, contract_name=MARKETPLACE_CONTRACT):
    """
    Record `address` under registry[network_id][contract_name] exactly once.
    New addresses are appended so the deployment history is kept in order.
    The registry is modified in place and returned.
    """
    _check_entry(network_id, address)
    if not isinstance(registry, dict):
        raise ValueError(f"Registry must be a JSON object, got {type(registry).__name__}")

    if network_id in registry:
        contracts = registry[network_id]
        if not isinstance(contracts, dict):
            raise ValueError(f"Registry entry for network {network_id} must be a JSON object")
        addresses = contracts.setdefault(contract_name, [])
        if not isinstance(addresses, list):
            raise ValueError(f"Addresses of {contract_name} on network {network_id} must be a JSON array")
        if address not in addresses:
            addresses.append(address)
    else:
        registry[network_id] = {contract_name: [address]}

    return registry


def load_registry(path):
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def save_registry(path, registry):
    with open(path, "w", encoding="utf-8") as f:
        json.dump(registry, f, indent=4, ensure_ascii=False)


def update_registry_file(path, network_id, address, contract_name=MARKETPLACE_CONTRACT):
    """
    Read the registry file, merge the address and write the whole file back.
    The file is rewritten even when the address was already recorded.
    """
    _check_entry(network_id, address)
    registry = load_registry(path)
    merge_address(registry, network_id, address, contract_name)
    save_registry(path, registry)
    return registry
