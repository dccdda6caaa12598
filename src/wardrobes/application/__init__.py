"""Application layer - use cases and configuration loading."""

from .commands import PricingError, Quote, QuoteCommand
from .context_builder import CustomerInput, RuleContextBuilder
from .factory import ServiceFactory, get_factory

__all__ = [
    "CustomerInput",
    "PricingError",
    "Quote",
    "QuoteCommand",
    "RuleContextBuilder",
    "ServiceFactory",
    "get_factory",
]
