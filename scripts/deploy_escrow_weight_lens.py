from brownie import accounts
from rich.console import Console

from config import ESCROW_WEIGHT_LENS
from config.deploy_config import active_network
from helpers.deployments import save_deployment
from helpers.DeployManager import DeployManager
from helpers.fixtures import deploy_escrow_weight_lens_fixture
from scripts.deploy_voting_escrow_v2_upgradeable import get_overrides

console = Console()


def main():
    """
    Deploys EscrowWeightLens, and the VotingEscrowV2Upgradeable it reads from
    if the deploy config doesn't have one yet.

    brownie run scripts/deploy_escrow_weight_lens.py --network bsc-test
    """
    network_name = active_network()
    console.print("You are deploying to", network_name)

    deploy_manager = DeployManager(accounts[0])
    output = deploy_escrow_weight_lens_fixture(deploy_manager, get_overrides(network_name), network_name)
    console.print(f"[green]Deployed {ESCROW_WEIGHT_LENS}[/green] 🚀")
    console.print(output.addresses.toDict())

    save_deployment(network_name, ESCROW_WEIGHT_LENS, output.addresses)

    failed = deploy_manager.verify_contracts()
    if failed:
        console.print("[red]Failed to verify:[/red]", ", ".join(failed))
