from brownie import accounts
from rich.console import Console

from config import HARDHAT, VOTING_ESCROW_V2
from config.deploy_config import FixtureOverrides, active_network
from helpers.deployments import save_deployment
from helpers.DeployManager import DeployManager
from helpers.fixtures import deploy_voting_escrow_v2_upgradeable_fixture

console = Console()


def get_overrides(network_name):
    ## On the local network there is no admin configured, use the second account
    if network_name == HARDHAT:
        return FixtureOverrides(account_overrides={"admin_address": accounts[1].address})
    return FixtureOverrides()


def main():
    """
    Deploys VotingEscrowV2Upgradeable with the deploy config of the active network.

    brownie run scripts/deploy_voting_escrow_v2_upgradeable.py --network bsc-test
    """
    network_name = active_network()
    console.print("You are deploying to", network_name)

    deploy_manager = DeployManager(accounts[0])
    output = deploy_voting_escrow_v2_upgradeable_fixture(
        deploy_manager, get_overrides(network_name), network_name
    )
    console.print(f"[green]Deployed {VOTING_ESCROW_V2}[/green] 🚀")
    console.print(output.addresses.toDict())

    save_deployment(network_name, VOTING_ESCROW_V2, output.addresses)

    failed = deploy_manager.verify_contracts()
    if failed:
        console.print("[red]Failed to verify:[/red]", ", ".join(failed))
