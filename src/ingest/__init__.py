"""Artist catalog ingestion pipeline.

This module reads catalog rows, derives image variants, and builds
Artist aggregates for the store layer.
"""
