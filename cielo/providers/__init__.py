from .base import Provider
from .cielo import CieloProvider, FeedResponse, get_cielo_provider

__all__ = ["Provider", "CieloProvider", "FeedResponse", "get_cielo_provider"]
