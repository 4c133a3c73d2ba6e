"""Storage layer.

This module persists Artist aggregates in a transactional store.
It powers full scans and identifier lookups for the SDK.
"""
