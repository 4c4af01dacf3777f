"""Upstream API adapters: one folder per public data source."""
