"""Storefront API: accounts, authentication, catalog and checkout history."""

__version__ = "0.1.0"
