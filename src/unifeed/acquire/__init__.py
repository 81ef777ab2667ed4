"""Acquisition layer for Unifeed.

This module provides retrieval of feed documents over HTTP,
optionally through an authenticated proxy.
"""

from unifeed.acquire.fetcher import FeedFetcher, build_proxy

__all__ = [
    "FeedFetcher",
    "build_proxy",
]
