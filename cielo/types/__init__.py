from .chains import Chain, ChainLike, EvmChain, parse_chain
from .requests import FeedRequest
from .tx_types import TxType

__all__ = [
    "Chain",
    "ChainLike",
    "EvmChain",
    "parse_chain",
    "FeedRequest",
    "TxType",
]
