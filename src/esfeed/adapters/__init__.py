"""Adapters – transport implementations for the feed protocol."""
