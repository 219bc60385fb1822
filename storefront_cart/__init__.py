# Storefront cart resolution and pricing composition

__version__ = "1.0.0"
