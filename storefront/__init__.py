"""Storefront order placement: exact Money and the Draft -> Placed engine."""

__version__ = "0.1.0"
