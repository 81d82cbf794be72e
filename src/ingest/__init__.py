"""Catalogue ingestion pipeline.

This module reads raw game records and runs normalization, validation,
and deduplication to produce the immutable catalogue.
"""
