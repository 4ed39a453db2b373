"""Subcommands for the cargo-proxy CLI."""
