"""Shared utilities for cargo-proxy."""
