from ape import networks, project

from nft_marketplace_tools.deployment import latest_deployment, update_front_end
from nft_marketplace_tools.settings import load_settings


def main():
    settings = load_settings()
    if not settings.update_front_end:
        print("UPDATE_FRONT_END is not set, skipping front end update.")
        return None

    provider = networks.provider
    nft_marketplace = latest_deployment(project.NftMarketplace, provider.network)
    print(f"--- Chain {provider.chain_id}: NftMarketplace at {nft_marketplace.address} ---")

    registry = update_front_end(nft_marketplace.address, provider.chain_id, settings)
    print(registry)
    return registry
