"""
Feed request → URL serialization.

Turns a FeedRequest into the query string the Cielo feed endpoint expects.
Parameters are appended in a fixed order and only when set; list filters are
comma-joined. Values are written as-is, the API does not expect them encoded.
"""

import logging
from typing import Iterable, List, Optional, Sequence

from ..config import FEED_BASE_URL
from ..errors import MissingRequiredField
from ..types import FeedRequest

logger = logging.getLogger(__name__)


def _join(items: Iterable[object]) -> str:
    return ",".join(getattr(item, "query_value", item) for item in items)


def _list_segment(name: str, items: Optional[Sequence[object]]) -> Optional[str]:
    # Empty lists are treated as absent
    if not items:
        return None
    return f"&{name}={_join(items)}"


def _bool_value(value: bool) -> str:
    return "true" if value else "false"


def build_query_segments(request: FeedRequest) -> List[str]:
    """Return the ordered query segments for ``request``.

    The first segment is ``wallet=<address>``; every following one starts
    with ``&``.

    Raises:
        MissingRequiredField: when ``request.wallet`` is not set.
    """
    if request.wallet is None:
        raise MissingRequiredField("wallet")

    candidates = [
        f"wallet={request.wallet}",
        f"&limit={request.limit}" if request.limit is not None else None,
        f"&list={request.list_id}" if request.list_id is not None else None,
        _list_segment("chains", request.chains),
        _list_segment("txTypes", request.tx_types),
        _list_segment("tokens", request.tokens),
        f"&minUSD={request.min_usd}" if request.min_usd is not None else None,
        f"&newTrades={_bool_value(request.new_trades)}" if request.new_trades is not None else None,
        f"&startFrom={request.start_from}" if request.start_from is not None else None,
        f"&fromTimestamp={request.from_timestamp}" if request.from_timestamp is not None else None,
        f"&toTimestamp={request.to_timestamp}" if request.to_timestamp is not None else None,
    ]
    return [segment for segment in candidates if segment is not None]


def build_feed_url(request: FeedRequest, base_url: str = FEED_BASE_URL) -> str:
    """Serialize ``request`` into a full feed URL.

    >>> build_feed_url(FeedRequest(wallet="0xABC", limit=10))
    'https://feed-api.cielo.finance/api/v1/feed?wallet=0xABC&limit=10'
    """
    url = base_url
    for segment in build_query_segments(request):
        url += segment
        logger.debug("Feed URL segment added %s: %s", segment, url)
    return url
