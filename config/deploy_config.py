"""
Deploy configuration per network.

Every deployable network has a table of defaults. Callers may pass overrides
for accounts and already deployed contracts; anything they leave out (or leave
empty) falls back to the network's default.
"""
import logging
from dataclasses import dataclass, field, fields, replace
from types import MappingProxyType
from typing import Any, Mapping, Tuple

from brownie import network

from config import (
    BSC,
    BSC_TESTNET,
    BSC_TESTNET_LOCK_TOKEN,
    BSC_WNATIVE,
    ESCROW_WEIGHT_STEPS,
    HARDHAT,
    HARDHAT_DEFAULT_ADMIN,
    UNKNOWN_ADDRESS,
    VE_NAME,
    VE_SYMBOL,
    VE_VERSION,
)

logger = logging.getLogger(__name__)

DEPLOYABLE_NETWORKS = (BSC, BSC_TESTNET, HARDHAT)

## brownie network id -> deploy config network
BROWNIE_NETWORK_ALIASES = {
    "bsc-main": BSC,
    "bsc-main-fork": BSC,
    "bsc-test": BSC_TESTNET,
    "development": HARDHAT,
    "hardhat": HARDHAT,
    "hardhat-fork": HARDHAT,
}


class UnknownNetworkError(ValueError):
    def __init__(self, network_name):
        super().__init__(f"No deploy config for network {network_name}")
        self.network = network_name


class InvalidWeightStepsError(ValueError):
    pass


@dataclass(frozen=True)
class DeploymentAccounts:
    ## Either an address or a brownie Account
    ## Informational only, no deployed contract takes an admin yet
    admin_address: Any = ""


@dataclass(frozen=True)
class DeploymentContractOverrides:
    """
    Addresses of contracts that are already deployed.
    An empty string means the deploy scripts deploy a fresh one.
    """

    lock_token: str = ""
    voting_escrow_v2_upgradeable: str = ""
    escrow_weight_lens: str = ""
    proxy_admin_address: str = ""
    art_proxy: str = ""


@dataclass(frozen=True)
class VeDetails:
    name: str
    symbol: str
    version: str


@dataclass(frozen=True)
class EscrowWeightLensConfig:
    """
    Step function from lock duration to weight multiplier.
    Stored as (duration_days_threshold, multiplier) pairs, longest threshold first,
    so thresholds and multipliers can't drift out of alignment.
    """

    steps: Tuple[Tuple[int, int], ...]

    def __post_init__(self):
        for step in self.steps:
            if not isinstance(step, (tuple, list)) or len(step) != 2:
                raise InvalidWeightStepsError(
                    f"Escrow weight steps must be (threshold, multiplier) pairs, got {step!r}"
                )
        steps = tuple(tuple(step) for step in self.steps)
        if not steps:
            raise InvalidWeightStepsError("Escrow weight steps can't be empty")

        for threshold, multiplier in steps:
            for value in (threshold, multiplier):
                if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                    raise InvalidWeightStepsError(
                        f"Escrow weight step values must be positive ints, got {value!r}"
                    )

        thresholds = [threshold for threshold, _ in steps]
        if any(longer <= shorter for longer, shorter in zip(thresholds, thresholds[1:])):
            raise InvalidWeightStepsError(
                f"Duration thresholds must be strictly descending, got {thresholds}"
            )

        object.__setattr__(self, "steps", steps)

    @classmethod
    def from_arrays(cls, duration_days_thresholds, multipliers):
        if len(duration_days_thresholds) != len(multipliers):
            raise InvalidWeightStepsError(
                f"Got {len(duration_days_thresholds)} thresholds but {len(multipliers)} multipliers"
            )
        return cls(tuple(zip(duration_days_thresholds, multipliers)))

    @property
    def duration_days_thresholds(self):
        return [threshold for threshold, _ in self.steps]

    @property
    def multipliers(self):
        return [multiplier for _, multiplier in self.steps]


@dataclass(frozen=True)
class DeploymentVariables:
    accounts: DeploymentAccounts
    contract_overrides: DeploymentContractOverrides
    w_native: str
    ve_details: VeDetails
    escrow_weight_lens: EscrowWeightLensConfig


def _check_keys(record_type, overrides, label):
    known = {f.name for f in fields(record_type)}
    unknown = sorted(set(overrides) - known)
    if unknown:
        raise ValueError(f"Unknown {label} override(s): {', '.join(unknown)}")


@dataclass(frozen=True)
class FixtureOverrides:
    account_overrides: Mapping[str, Any] = field(default_factory=dict)
    contract_overrides: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        account_overrides = dict(self.account_overrides or {})
        contract_overrides = dict(self.contract_overrides or {})
        _check_keys(DeploymentAccounts, account_overrides, "account")
        _check_keys(DeploymentContractOverrides, contract_overrides, "contract")
        object.__setattr__(self, "account_overrides", MappingProxyType(account_overrides))
        object.__setattr__(self, "contract_overrides", MappingProxyType(contract_overrides))

    @classmethod
    def coerce(cls, overrides):
        if overrides is None:
            return cls()
        if isinstance(overrides, cls):
            return overrides
        return cls(**overrides)


def _patch(defaults, overrides):
    ## Empty values ("" / None) keep the default
    return replace(defaults, **{key: value for key, value in overrides.items() if value})


def apply_overrides(variables, overrides=None):
    """
    Returns a new DeploymentVariables with the overrides patched over `variables`.
    """
    overrides = FixtureOverrides.coerce(overrides)
    return replace(
        variables,
        accounts=_patch(variables.accounts, overrides.account_overrides),
        contract_overrides=_patch(variables.contract_overrides, overrides.contract_overrides),
    )


def _ve_details():
    return VeDetails(name=VE_NAME, symbol=VE_SYMBOL, version=VE_VERSION)


def _escrow_weight_lens():
    return EscrowWeightLensConfig(tuple(ESCROW_WEIGHT_STEPS))


def _bsc_defaults():
    return DeploymentVariables(
        accounts=DeploymentAccounts(admin_address=""),
        contract_overrides=DeploymentContractOverrides(),
        w_native=BSC_WNATIVE,
        ve_details=_ve_details(),
        escrow_weight_lens=_escrow_weight_lens(),
    )


def _bsc_testnet_defaults():
    return DeploymentVariables(
        accounts=DeploymentAccounts(admin_address=UNKNOWN_ADDRESS),
        contract_overrides=DeploymentContractOverrides(lock_token=BSC_TESTNET_LOCK_TOKEN),
        w_native=UNKNOWN_ADDRESS,
        ve_details=_ve_details(),
        escrow_weight_lens=_escrow_weight_lens(),
    )


def _hardhat_defaults():
    return DeploymentVariables(
        accounts=DeploymentAccounts(admin_address=HARDHAT_DEFAULT_ADMIN),
        contract_overrides=DeploymentContractOverrides(),
        w_native=UNKNOWN_ADDRESS,
        ve_details=_ve_details(),
        escrow_weight_lens=_escrow_weight_lens(),
    )


DEPLOYABLE_NETWORK_CONFIG = MappingProxyType(
    {
        BSC: _bsc_defaults,
        BSC_TESTNET: _bsc_testnet_defaults,
        HARDHAT: _hardhat_defaults,
    }
)


def get_deploy_config(network_name, overrides=None):
    """
    Get the deploy config for a given network

    overrides is a FixtureOverrides (or a dict with `account_overrides` and
    `contract_overrides` keys) whose non-empty values replace the defaults.
    """
    defaults = DEPLOYABLE_NETWORK_CONFIG.get(network_name)
    if defaults is None:
        raise UnknownNetworkError(network_name)
    return apply_overrides(defaults(), overrides)


def active_network():
    """
    Deploy config network for the network brownie is connected to
    """
    name = network.show_active()
    resolved = BROWNIE_NETWORK_ALIASES.get(name, name)
    logger.debug("Brownie network %s resolves to deploy config %s", name, resolved)
    return resolved
