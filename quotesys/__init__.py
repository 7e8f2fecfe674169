"""Core package for quote and background resolution.

The resolver, stores and provider clients live in their own modules; this
package only exposes the most common entry points.
"""

from quotesys.models import BackgroundPhoto, PhotoOrigin, ProviderName, QuoteOrigin, Quotation
from quotesys.resolver import ContentResolver

__all__ = [
    "BackgroundPhoto",
    "ContentResolver",
    "PhotoOrigin",
    "ProviderName",
    "QuoteOrigin",
    "Quotation",
]
