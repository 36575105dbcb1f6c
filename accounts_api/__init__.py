"""Accounts API: user sign-up with JWT session cookies."""

__version__ = "0.1.0"
