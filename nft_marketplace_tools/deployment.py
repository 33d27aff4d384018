# file: deployment.py
# Helpers shared by the ape deploy scripts.
from ape.logging import logger

from nft_marketplace_tools.address_registry import MARKETPLACE_CONTRACT, update_registry_file
from nft_marketplace_tools.settings import is_development_network

SEPARATOR = "_" * 84


class DeploymentError(RuntimeError):
    pass


def get_deployer(accounts, network, settings):
    """
    First test account on development networks (local or fork), otherwise the
    ape account named by DEPLOYER_ACCOUNT (autosign when a passphrase is configured).
    """
    if is_development_network(network):
        return accounts.test_accounts[0]

    if not settings.deployer_alias:
        raise DeploymentError(f"DEPLOYER_ACCOUNT must be set to deploy on '{network.name}'")

    deployer = accounts.load(settings.deployer_alias)
    if settings.deployer_passphrase:
        deployer.set_autosign(True, passphrase=settings.deployer_passphrase)
    return deployer


def should_verify(network, settings) -> bool:
    return not is_development_network(network) and bool(settings.etherscan_api_key)


def verify(explorer, address, args):
    """Publish the contract source on the network's block explorer."""
    if explorer is None:
        raise DeploymentError("No explorer plugin configured for this network (install ape-etherscan)")

    logger.info(f"Verifying {address} (constructor args: {list(args)})...")
    try:
        explorer.publish_contract(address)
    except Exception as err:
        if "already verified" not in str(err).lower():
            raise
        logger.info(f"{address} is already verified")


def deploy_contract(container, deployer, network, settings, args=()):
    """
    Deploy `container` from `deployer` and wait for the network's confirmations.
    The contract is verified when not on a development network and an explorer
    API key is configured.
    """
    confirmations = settings.confirmations_for(network)

    contract = container.deploy(*args, sender=deployer, required_confirmations=confirmations)
    logger.success(f"{container.contract_type.name} deployed at {contract.address}")

    if should_verify(network, settings):
        verify(network.explorer, contract.address, args)

    logger.info(SEPARATOR)
    return contract


def latest_deployment(container, network):
    deployments = container.deployments
    if len(deployments) == 0:
        raise DeploymentError(f"no {container.contract_type.name} deployment recorded on {network.name}")
    return deployments[-1]


def update_front_end(address, chain_id, settings):
    """Record the marketplace address in the front-end registry when UPDATE_FRONT_END is set."""
    if not settings.update_front_end:
        return None

    logger.info("updating front end...")
    return update_registry_file(
        settings.front_end_contracts_file,
        str(chain_id),
        address,
        contract_name=MARKETPLACE_CONTRACT,
    )


def deploy_all(project, accounts, provider, settings):
    """
    Deploy NftMarketplace then BasicNft, then record the fresh marketplace
    address in the front-end registry. Returns (nft_marketplace, basic_nft, registry);
    registry is None when the front-end step is disabled.
    """
    network = provider.network
    deployer = get_deployer(accounts, network, settings)

    nft_marketplace = deploy_contract(project.NftMarketplace, deployer, network, settings)
    basic_nft = deploy_contract(project.BasicNft, deployer, network, settings)
    registry = update_front_end(nft_marketplace.address, provider.chain_id, settings)
    return nft_marketplace, basic_nft, registry
