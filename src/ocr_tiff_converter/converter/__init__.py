"""Batch-conversion core helpers."""
