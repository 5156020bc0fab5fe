from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .chains import ChainLike, parse_chain
from .tx_types import TxType


class FeedRequest(BaseModel):
    """Filters for a single call to the Cielo feed endpoint.

    Every field is optional at the model level; ``wallet`` is enforced when the
    request is turned into a URL.
    """

    model_config = ConfigDict(frozen=True)

    wallet: Optional[str] = Field(default=None, description="Wallet address")
    limit: Optional[int] = Field(default=None, description="Max transactions returned (API max is 100)")
    list_id: Optional[int] = Field(default=None, description="Only transactions of wallets in this list")
    chains: Optional[List[ChainLike]] = Field(default=None, description="Only transactions on these chains")
    tx_types: Optional[List[TxType]] = Field(default=None, description="Only transactions of these types")
    tokens: Optional[List[str]] = Field(default=None, description="Token addresses or symbols")
    min_usd: Optional[int] = Field(default=None, description="Minimum USD value of a transaction")
    new_trades: Optional[bool] = Field(default=None, description="Only new trades")
    start_from: Optional[str] = Field(
        default=None,
        description="Paging cursor, the paging.next_object_id of a previous response",
    )
    from_timestamp: Optional[int] = Field(default=None, description="UTC epoch lower bound")
    to_timestamp: Optional[int] = Field(default=None, description="UTC epoch upper bound")

    @field_validator("chains", mode="before")
    @classmethod
    def _coerce_chains(cls, value: Any) -> Any:
        if value is None:
            return value
        return [parse_chain(item) if isinstance(item, str) else item for item in value]
