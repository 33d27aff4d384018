import json
from types import SimpleNamespace

import pytest

from nft_marketplace_tools.deployment import deploy_contract
from nft_marketplace_tools.settings import Settings, is_development_network

MARKETPLACE_CONTRACTS = ("NftMarketplace", "BasicNft")
TOKEN_ID = 0


@pytest.fixture
def settings():
    return Settings()


def make_network(name, is_dev=False, explorer=None):
    return SimpleNamespace(name=name, is_dev=is_dev, explorer=explorer)


@pytest.fixture
def registry_file(tmp_path):
    path = tmp_path / "networkMapping.json"
    path.write_text(json.dumps({}), encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Marketplace fixtures (ape test plugin: accounts, project, networks)
# ---------------------------------------------------------------------------

@pytest.fixture
def development_network(networks, project):
    network = networks.provider.network
    if not is_development_network(network):
        pytest.skip(f"Marketplace tests only run on development networks, not '{network.name}'")

    missing = [name for name in MARKETPLACE_CONTRACTS if not hasattr(project, name)]
    if missing:
        pytest.skip(f"Contract types not found in project: {', '.join(missing)}")
    return network


@pytest.fixture
def deployer(accounts):
    return accounts[0]


@pytest.fixture
def player(accounts):
    return accounts[1]


@pytest.fixture
def nft_marketplace(project, deployer, development_network, settings):
    return deploy_contract(project.NftMarketplace, deployer, development_network, settings)


@pytest.fixture
def basic_nft(project, deployer, development_network, settings):
    return deploy_contract(project.BasicNft, deployer, development_network, settings)


@pytest.fixture
def minted_token_id(basic_nft, nft_marketplace, deployer):
    basic_nft.mintNft(sender=deployer)
    basic_nft.approve(nft_marketplace.address, TOKEN_ID, sender=deployer)
    return TOKEN_ID
