from dataclasses import dataclass
from enum import Enum
from typing import Union


class Chain(str, Enum):
    """Chains the feed API knows by name."""
    SOLANA = "solana"
    ETHEREUM = "ethereum"

    @property
    def query_value(self) -> str:
        return self.value


@dataclass(frozen=True)
class EvmChain:
    """Any other EVM network, e.g. EvmChain("polygon").

    The slug is passed to the API untouched.
    """
    name: str

    @property
    def query_value(self) -> str:
        return self.name


ChainLike = Union[Chain, EvmChain]


def parse_chain(value: Union[str, ChainLike]) -> ChainLike:
    """Map a chain slug to a known Chain, or wrap it as an EvmChain."""
    if isinstance(value, (Chain, EvmChain)):
        return value
    try:
        return Chain(value)
    except ValueError:
        return EvmChain(value)
