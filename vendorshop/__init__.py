"""A console storefront for a single vendor: profile, media and goods products, sales."""

__version__ = "0.1.0"
__all__ = ["__version__"]