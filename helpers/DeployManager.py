import logging

from brownie import Contract, network, project
from brownie.exceptions import ContractNotFound, ProjectNotFound
from dotmap import DotMap

from config import LOCAL_BLOCKCHAIN_ENVIRONMENTS, PROXY_ADMIN_NAME, PROXY_NAME

logger = logging.getLogger(__name__)


def get_project_containers():
    """
    Contract containers of the active brownie project, by name
    """
    loaded = project.get_loaded_projects()
    if not loaded:
        raise ProjectNotFound("No brownie project is loaded, run this through `brownie`")
    return loaded[0].dict()


def is_local_network(name):
    ## Forks only live on the local node
    return name in LOCAL_BLOCKCHAIN_ENVIRONMENTS or str(name).endswith("-fork")


class DeployManager:
    """
    Deploys contracts from a single signer and remembers what it deployed,
    so everything can be verified on the explorer in one go at the end.
    """

    def __init__(self, signer, contracts=None, verify=None):
        self.signer = signer
        self.contracts = contracts if contracts is not None else get_project_containers()
        if verify is None:
            verify = network.is_connected() and not is_local_network(network.show_active())
        self.verify = verify
        self.deployed = []
        self.proxy_admin = None

    def get_container(self, name):
        try:
            return self.contracts[name]
        except KeyError:
            raise ContractNotFound(f"No contract artifact named {name}") from None

    def deploy_contract(self, name, args=()):
        container = self.get_container(name)
        contract = container.deploy(*args, {"from": self.signer})
        logger.info("Deployed %s at %s", name, contract.address)
        self.deployed.append((name, contract))
        return contract

    def get_proxy_admin(self, proxy_admin_address=""):
        if proxy_admin_address:
            return proxy_admin_address
        if self.proxy_admin is None:
            logger.warning("No proxyAdmin provided, deploying %s...", PROXY_ADMIN_NAME)
            self.proxy_admin = self.deploy_contract(PROXY_ADMIN_NAME)
        return self.proxy_admin.address

    def deploy_upgradeable_contract(
        self, name, args=(), proxy_admin_address="", initializer="initialize"
    ):
        """
        Deploys the logic of `name`, then a TransparentUpgradeableProxy pointing at it
        which calls `initializer(*args)` on construction.

        Libraries must be deployed beforehand, brownie links them automatically.
        """
        implementation = self.deploy_contract(name)
        admin = self.get_proxy_admin(proxy_admin_address)

        init_data = getattr(implementation, initializer).encode_input(*args)
        proxy = self.deploy_contract(PROXY_NAME, [implementation, admin, init_data])

        implementation_through_proxy = Contract.from_abi(
            name, proxy.address, self.get_container(name).abi
        )
        logger.info("%s proxy at %s (admin %s)", name, proxy.address, admin)

        return DotMap(
            implementation=implementation,
            implementation_through_proxy=implementation_through_proxy,
            proxy=proxy,
            proxy_admin=admin,
        )

    def verify_contracts(self):
        """
        Publishes the source of every deployed contract.
        Returns the names that failed to verify.
        """
        if not self.verify:
            logger.info("Skipping verification of %d contracts", len(self.deployed))
            return []

        failed = []
        for name, contract in self.deployed:
            try:
                self.get_container(name).publish_source(contract)
            except Exception:
                logger.exception("Failed to verify %s at %s", name, contract.address)
                failed.append(name)
        return failed
