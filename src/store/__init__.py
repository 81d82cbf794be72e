"""Catalogue storage layer.

This module holds the immutable catalogue, facet indexes, and
diagnostics, and exposes the SDK client built on top of them.
"""
