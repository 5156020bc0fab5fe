from .feed_query import build_feed_url, build_query_segments

__all__ = ["build_feed_url", "build_query_segments"]
