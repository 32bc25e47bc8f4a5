import itertools
from types import SimpleNamespace

import pytest

import helpers.DeployManager as deploy_manager_module
from config import (
    ERC20_MOCK,
    ESCROW_DELEGATE_CHECKPOINTS,
    ESCROW_WEIGHT_LENS,
    PROXY_ADMIN_NAME,
    PROXY_NAME,
    VE_ART_PROXY,
    VOTING_ESCROW,
    VOTING_ESCROW_V2,
)
from helpers.DeployManager import DeployManager
from helpers.fixtures import deploy_voting_escrow_fixture


"""
In-memory stand-ins for brownie accounts, contract containers and chain,
so deploy logic can be tested without a node or compiled contracts
"""


def to_address(value):
    return getattr(value, "address", value)


class FakeAccount:
    def __init__(self, address):
        self.address = address

    def __str__(self):
        return self.address


class FakeMethod:
    def __init__(self, name):
        self.name = name

    def encode_input(self, *args):
        return (self.name, args)


class FakeContract:
    def __init__(self, name, args, owner, address=None):
        self.name = name
        self.args = args
        self.owner = owner
        self.address = address
        self.initialize = FakeMethod("initialize")


class FakeERC20Mock(FakeContract):
    def __init__(self, name, args, owner, address=None):
        super().__init__(name, args, owner, address)
        supply, self.decimals, self.token_name, self.symbol = args
        self.balances = {owner.address: supply}
        self.allowances = {}

    def balanceOf(self, account):
        return self.balances.get(to_address(account), 0)

    def allowance(self, owner, spender):
        return self.allowances.get((to_address(owner), to_address(spender)), 0)

    def approve(self, spender, amount, tx):
        self.allowances[(tx["from"].address, to_address(spender))] = amount

    def transfer(self, to, amount, tx):
        sender = tx["from"].address
        if self.balances.get(sender, 0) < amount:
            raise ValueError("ERC20: transfer amount exceeds balance")
        self.balances[sender] -= amount
        self.balances[to_address(to)] = self.balances.get(to_address(to), 0) + amount


class FakeVotingEscrowV2(FakeContract):
    def __init__(self, name, args, owner, address=None, art_proxy=""):
        super().__init__(name, args, owner, address)
        self.art_proxy = art_proxy

    def artProxy(self):
        return self.art_proxy


class FakeProxied:
    """What Contract.from_abi hands back for a proxy"""

    def __init__(self, name, address, proxy):
        self.name = name
        self.address = address
        self.proxy = proxy

    @property
    def initialized_with(self):
        return self.proxy.args[2][1]


class FakeContainer:
    def __init__(self, world, name, factory=FakeContract):
        self.world = world
        self.name = name
        self.factory = factory
        self.abi = [{"name": name}]
        self.deployments = []
        self.published = []
        self.fail_publish = False

    def deploy(self, *args):
        *args, tx = args
        contract = self.factory(self.name, tuple(args), tx["from"], self.world.next_address())
        self.world.register(contract)
        self.deployments.append(contract)
        return contract

    def at(self, address):
        return self.world.known.get(address) or FakeContract(self.name, (), None, address)

    def publish_source(self, contract):
        if self.fail_publish:
            raise ConnectionError("explorer unavailable")
        self.published.append(contract.address)


class FakeWorld:
    def __init__(self):
        self._addresses = itertools.count(1)
        self.known = {}
        self.accounts = [FakeAccount(self.next_address()) for _ in range(5)]
        self.containers = {
            name: FakeContainer(self, name)
            for name in (
                ESCROW_DELEGATE_CHECKPOINTS,
                ESCROW_WEIGHT_LENS,
                PROXY_ADMIN_NAME,
                PROXY_NAME,
                VE_ART_PROXY,
                VOTING_ESCROW,
            )
        }
        self.containers[ERC20_MOCK] = FakeContainer(self, ERC20_MOCK, FakeERC20Mock)
        self.containers[VOTING_ESCROW_V2] = FakeContainer(self, VOTING_ESCROW_V2, FakeVotingEscrowV2)

    def next_address(self):
        return f"0x{next(self._addresses):040x}"

    def register(self, contract):
        self.known[contract.address] = contract

    def from_abi(self, name, address, abi):
        return FakeProxied(name, address, self.known[address])


class FakeChain:
    def __init__(self, now):
        self.now = now

    def time(self):
        return self.now


@pytest.fixture
def world(monkeypatch):
    world = FakeWorld()
    monkeypatch.setattr(deploy_manager_module, "Contract", SimpleNamespace(from_abi=world.from_abi))
    return world


@pytest.fixture
def contracts(world):
    return world.containers


@pytest.fixture
def chain():
    return FakeChain(1_700_000_000)


@pytest.fixture
def deploy_manager(world):
    return DeployManager(world.accounts[0], contracts=world.containers, verify=False)


@pytest.fixture
def deployed(world, chain):
    """
    Deploys the mock token and VotingEscrow and funds the test accounts
    """
    return deploy_voting_escrow_fixture(contracts=world.containers, accounts=world.accounts, chain=chain)


## Contracts ##


@pytest.fixture
def mock_token(deployed):
    return deployed.mock_token


@pytest.fixture
def voting_escrow(deployed):
    return deployed.voting_escrow


## Accounts ##


@pytest.fixture
def owner(deployed):
    return deployed.owner


@pytest.fixture
def test_accounts(deployed):
    return [deployed.alice, deployed.bob, deployed.calvin]
