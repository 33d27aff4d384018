from ape import accounts, networks, project

from nft_marketplace_tools.deployment import deploy_contract, get_deployer
from nft_marketplace_tools.settings import load_settings


def main():
    settings = load_settings()
    network = networks.provider.network
    deployer = get_deployer(accounts, network, settings)

    print(f"--- Deploying BasicNft on {network.name} from {deployer.address} ---")
    return deploy_contract(project.BasicNft, deployer, network, settings)
