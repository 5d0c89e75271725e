"""Multi-entity generation scenarios."""

from .ecommerce import EcommerceScenario

__all__ = ["EcommerceScenario"]
