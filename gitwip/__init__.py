"""Selective staging, commit construction and WIP snapshots for git repositories."""

__version__ = "0.1.0"
