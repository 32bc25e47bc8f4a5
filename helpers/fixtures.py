"""
Contract deployment fixtures shared by the tests and the deploy scripts.

Nothing here catches deployment errors: if a deploy or transfer fails the
fixture fails with it.
"""
import logging

import brownie
from brownie.exceptions import ContractNotFound
from dotmap import DotMap

from config import (
    ERC20_MOCK,
    ESCROW_DELEGATE_CHECKPOINTS,
    ESCROW_WEIGHT_LENS,
    MOCK_TOKEN_DECIMALS,
    MOCK_TOKEN_DEPLOY_SUPPLY,
    MOCK_TOKEN_NAME,
    MOCK_TOKEN_SYMBOL,
    TEST_ACCOUNT_BALANCE,
    TEST_TOKEN_SUPPLY,
    TEST_VE_NAME,
    TEST_VE_SYMBOL,
    TEST_VE_VERSION,
    VE_ART_PROXY,
    VOTING_ESCROW,
    VOTING_ESCROW_V2,
)
from config.deploy_config import active_network, get_deploy_config
from helpers.constants import ONE_GWEI, ONE_YEAR_IN_SECS
from helpers.DeployManager import get_project_containers

logger = logging.getLogger(__name__)


def deploy_voting_escrow_fixture(contracts=None, accounts=None, chain=None):
    """
    Deploys a mock token and a VotingEscrow on top of it, then funds alice, bob and calvin
    and has everyone approve the escrow
    """
    if contracts is None:
        contracts = get_project_containers()
    if accounts is None:
        accounts = brownie.accounts
    if chain is None:
        chain = brownie.chain

    owner, alice, bob, calvin = accounts[:4]

    mock_token = contracts[ERC20_MOCK].deploy(
        TEST_TOKEN_SUPPLY, MOCK_TOKEN_DECIMALS, MOCK_TOKEN_NAME, MOCK_TOKEN_SYMBOL, {"from": owner}
    )
    voting_escrow = contracts[VOTING_ESCROW].deploy(
        TEST_VE_NAME, TEST_VE_SYMBOL, TEST_VE_VERSION, mock_token.address, {"from": owner}
    )

    ## Approving the whole supply, nobody can ever go over it
    mock_token.approve(voting_escrow.address, TEST_TOKEN_SUPPLY, {"from": owner})
    for account in (alice, bob, calvin):
        mock_token.transfer(account.address, TEST_ACCOUNT_BALANCE, {"from": owner})
        mock_token.approve(voting_escrow.address, TEST_TOKEN_SUPPLY, {"from": account})

    return DotMap(
        mock_token=mock_token,
        voting_escrow=voting_escrow,
        unlock_time=chain.time() + ONE_YEAR_IN_SECS,
        locked_amount=ONE_GWEI,
        duration=ONE_YEAR_IN_SECS,
        owner=owner,
        alice=alice,
        bob=bob,
        calvin=calvin,
    )


def dynamic_fixture(deploy_manager, contract_name, params=None):
    """
    Deploys any contract by name, contract is None if the artifact doesn't exist
    """
    try:
        deploy_manager.get_container(contract_name)
    except ContractNotFound:
        logger.warning("No artifact for %s, skipping", contract_name)
        return DotMap(contract=None)

    return DotMap(contract=deploy_manager.deploy_contract(contract_name, params or []))


def deploy_voting_escrow_v2_upgradeable_fixture(deploy_manager, overrides=None, network_name=None):
    """
    Deploys VotingEscrowV2Upgradeable and its dependencies from the network's deploy config.

    Only the lock token, the art proxy and the escrow itself are looked up in the
    contract overrides. When the escrow has to be deployed the EscrowDelegateCheckpoints
    library is always deployed with it.
    """
    if network_name is None:
        network_name = active_network()
    deploy_config = get_deploy_config(network_name, overrides)
    contract_overrides = deploy_config.contract_overrides
    ve_details = deploy_config.ve_details

    lock_token_address = contract_overrides.lock_token
    if not lock_token_address:
        logger.warning("No lockToken provided in deploy config, deploying %s...", ERC20_MOCK)
        lock_token = deploy_manager.deploy_contract(
            ERC20_MOCK,
            [MOCK_TOKEN_DEPLOY_SUPPLY, MOCK_TOKEN_DECIMALS, MOCK_TOKEN_NAME, MOCK_TOKEN_SYMBOL],
        )
        lock_token_address = lock_token.address
    else:
        logger.info("Lock token address provided, using existing ERC20 token %s", lock_token_address)
        lock_token = deploy_manager.get_container(ERC20_MOCK).at(lock_token_address)

    voting_escrow_address = contract_overrides.voting_escrow_v2_upgradeable
    voting_escrow_implementation = "not set"
    if not voting_escrow_address:
        logger.warning("%s address not provided, deploying a new one...", VOTING_ESCROW_V2)
        deploy_manager.deploy_contract(ESCROW_DELEGATE_CHECKPOINTS)

        art_proxy_address = contract_overrides.art_proxy
        if not art_proxy_address:
            logger.warning("No artProxy provided in deploy config, deploying %s through proxy...", VE_ART_PROXY)
            ve_art_proxy = deploy_manager.deploy_upgradeable_contract(
                VE_ART_PROXY, [], contract_overrides.proxy_admin_address
            ).implementation_through_proxy
            art_proxy_address = ve_art_proxy.address
        else:
            logger.info("ArtProxy address provided, using existing %s %s", VE_ART_PROXY, art_proxy_address)
            ve_art_proxy = deploy_manager.get_container(VE_ART_PROXY).at(art_proxy_address)

        deployed = deploy_manager.deploy_upgradeable_contract(
            VOTING_ESCROW_V2,
            [ve_details.name, ve_details.symbol, ve_details.version, lock_token_address, art_proxy_address],
            contract_overrides.proxy_admin_address,
        )
        voting_escrow = deployed.implementation_through_proxy
        voting_escrow_implementation = deployed.implementation.address
    else:
        logger.info("%s address provided, using existing %s", VOTING_ESCROW_V2, voting_escrow_address)
        voting_escrow = deploy_manager.get_container(VOTING_ESCROW_V2).at(voting_escrow_address)
        ve_art_proxy = deploy_manager.get_container(VE_ART_PROXY).at(voting_escrow.artProxy())

    return DotMap(
        contracts=DotMap(
            voting_escrow_v2_upgradeable=voting_escrow,
            ve_art_proxy=ve_art_proxy,
            lock_token=lock_token,
        ),
        addresses=DotMap(
            voting_escrow_v2_upgradeable=voting_escrow.address,
            voting_escrow_v2_implementation=voting_escrow_implementation,
            lock_token=lock_token.address,
        ),
    )


def deploy_escrow_weight_lens_fixture(deploy_manager, overrides=None, network_name=None):
    """
    Deploys EscrowWeightLens on top of a VotingEscrowV2Upgradeable, deploying the escrow
    first when the deploy config doesn't point at one
    """
    if network_name is None:
        network_name = active_network()
    deploy_config = get_deploy_config(network_name, overrides)
    contract_overrides = deploy_config.contract_overrides
    lens_config = deploy_config.escrow_weight_lens

    voting_escrow_address = contract_overrides.voting_escrow_v2_upgradeable
    if not voting_escrow_address:
        voting_escrow_output = deploy_voting_escrow_v2_upgradeable_fixture(
            deploy_manager, overrides, network_name
        )
        voting_escrow = voting_escrow_output.contracts.voting_escrow_v2_upgradeable
        voting_escrow_address = voting_escrow.address
    else:
        voting_escrow = deploy_manager.get_container(VOTING_ESCROW_V2).at(voting_escrow_address)

    escrow_weight_lens_address = contract_overrides.escrow_weight_lens
    escrow_weight_lens_implementation = "not set"
    if not escrow_weight_lens_address:
        logger.warning("%s address not provided, deploying a new one...", ESCROW_WEIGHT_LENS)
        deployed = deploy_manager.deploy_upgradeable_contract(
            ESCROW_WEIGHT_LENS,
            [voting_escrow_address, lens_config.duration_days_thresholds, lens_config.multipliers],
            contract_overrides.proxy_admin_address,
        )
        escrow_weight_lens = deployed.implementation_through_proxy
        escrow_weight_lens_implementation = deployed.implementation.address
    else:
        logger.info("%s address provided, using existing %s", ESCROW_WEIGHT_LENS, escrow_weight_lens_address)
        escrow_weight_lens = deploy_manager.get_container(ESCROW_WEIGHT_LENS).at(escrow_weight_lens_address)

    return DotMap(
        contracts=DotMap(
            escrow_weight_lens=escrow_weight_lens,
            voting_escrow_v2_upgradeable=voting_escrow,
        ),
        addresses=DotMap(
            escrow_weight_lens=escrow_weight_lens.address,
            escrow_weight_lens_implementation=escrow_weight_lens_implementation,
        ),
    )
