## One file with the settings for the voting escrow deployment
## Deploy scripts, fixtures and tests all read their constants from here

## Networks the deploy config knows about
BSC = "bsc"
BSC_TESTNET = "bscTestnet"
HARDHAT = "hardhat"

## Brownie network ids that never get source verification
LOCAL_BLOCKCHAIN_ENVIRONMENTS = ["development", "hardhat", "anvil", "ganache"]

# https://bscscan.com/address/0xbb4CdB9CBd36B01bD1cBaEBF2De08d9173bc095c
BSC_WNATIVE = "0xbb4CdB9CBd36B01bD1cBaEBF2De08d9173bc095c"  ## WBNB
BSC_TESTNET_LOCK_TOKEN = "0xedb8b85a779e872e2aeef39df96a7fcc7d5ea6af"
UNKNOWN_ADDRESS = "0x"
HARDHAT_DEFAULT_ADMIN = "0x-no-address-passed"

## veNFT metadata
VE_NAME = "Vote Escrow"
VE_SYMBOL = "veToken"
VE_VERSION = "1"

## (duration in days, multiplier in basis points), longest lock first
ESCROW_WEIGHT_STEPS = [(365, 2000), (180, 1500), (90, 1250), (45, 1000)]

## Artifact names
ERC20_MOCK = "ERC20Mock"
VOTING_ESCROW = "VotingEscrow"
VOTING_ESCROW_V2 = "VotingEscrowV2Upgradeable"
ESCROW_DELEGATE_CHECKPOINTS = "EscrowDelegateCheckpoints"
VE_ART_PROXY = "VeArtProxyUpgradeable"
ESCROW_WEIGHT_LENS = "EscrowWeightLens"
PROXY_NAME = "TransparentUpgradeableProxy"
PROXY_ADMIN_NAME = "ProxyAdmin"

## Mock token used by the deploy fixtures when no lock token is configured
MOCK_TOKEN_NAME = "ERC20Mock"
MOCK_TOKEN_SYMBOL = "MOCK"
MOCK_TOKEN_DECIMALS = 18
MOCK_TOKEN_DEPLOY_SUPPLY = 100_000_000_000_000_000_000_000_000_000_000_000

## VotingEscrow test fixture
TEST_TOKEN_SUPPLY = 1_000_000_000_000_000_000_000_000_000_000
TEST_ACCOUNT_BALANCE = 1_000_000_000_000_000_000_000  ## 1000 tokens
TEST_VE_NAME = "VotingEscrow"
TEST_VE_SYMBOL = "veTOKEN"
TEST_VE_VERSION = "1.0"
