from rich.console import Console
from tabulate import tabulate

from config.deploy_config import DEPLOYABLE_NETWORKS, get_deploy_config

console = Console()

tableHead = ["Setting", "Value"]


def config_rows(deploy_config):
    rows = [
        ["adminAddress", deploy_config.accounts.admin_address or "-"],
        ["wNative", deploy_config.w_native],
    ]
    for key, value in vars(deploy_config.contract_overrides).items():
        rows.append([key, value or "deploy new"])
    ve_details = deploy_config.ve_details
    rows.append(["veDetails", f"{ve_details.name} ({ve_details.symbol}) v{ve_details.version}"])
    for threshold, multiplier in deploy_config.escrow_weight_lens.steps:
        rows.append([f">= {threshold} days", multiplier])
    return rows


def main():
    """
    Prints the resolved deploy config of every deployable network.
    Does not need a network connection, resolving a config also validates it.
    """
    for network_name in DEPLOYABLE_NETWORKS:
        console.print("[blue]Deploy config for[/blue]", network_name)
        print(tabulate(config_rows(get_deploy_config(network_name)), tableHead, tablefmt="grid"))


if __name__ == "__main__":
    main()
