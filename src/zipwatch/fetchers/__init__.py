"""Upstream data fetchers."""
