"""Client for the Cielo wallet feed API."""

from .errors import (
    CieloApiError,
    CieloConfigError,
    CieloError,
    CieloValidationError,
    MissingRequiredField,
)
from .providers import CieloProvider, FeedResponse, get_cielo_provider
from .services import build_feed_url
from .types import Chain, EvmChain, FeedRequest, TxType, parse_chain

__all__ = [
    "CieloApiError",
    "CieloConfigError",
    "CieloError",
    "CieloValidationError",
    "MissingRequiredField",
    "CieloProvider",
    "FeedResponse",
    "get_cielo_provider",
    "build_feed_url",
    "Chain",
    "EvmChain",
    "FeedRequest",
    "TxType",
    "parse_chain",
]
