from enum import Enum


class TxType(str, Enum):
    """Transaction categories accepted by the feed's txTypes filter."""
    BRIDGE = "bridge"
    CONTRACT_CREATION = "contract_creation"
    CONTRACT_INTERACTION = "contract_interaction"
    FLASHLOAN = "flashloan"
    LENDING = "lending"
    LP = "lp"
    NFT_LENDING = "nft_lending"
    NFT_LIQUIDATION = "nft_liquidation"
    NFT_MINT = "nft_mint"
    NFT_SWEEP = "nft_sweep"
    NFT_TRADE = "nft_trade"
    NFT_TRANSFER = "nft_transfer"
    OPTION = "option"
    PERP = "perp"
    REWARD = "reward"
    STAKING = "staking"
    SUDO_POOL = "sudo_pool"
    SWAP = "swap"
    TRANSFER = "transfer"
    WRAP = "wrap"

    @property
    def query_value(self) -> str:
        return self.value
