from ape import accounts, networks, project

from nft_marketplace_tools.deployment import deploy_all
from nft_marketplace_tools.settings import load_settings


def main():
    settings = load_settings()
    provider = networks.provider

    print(f"--- Deploying all contracts on {provider.network.name} ---")
    nft_marketplace, basic_nft, registry = deploy_all(project, accounts, provider, settings)

    if registry is None:
        print("UPDATE_FRONT_END is not set, skipping front end update.")
    print("Deployment completed.")
    return nft_marketplace, basic_nft
