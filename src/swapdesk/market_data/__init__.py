"""Market data layer -- normalized token catalog."""

from swapdesk.market_data.catalog import PINNED_SYMBOLS, PriceCatalog

__all__ = ["PINNED_SYMBOLS", "PriceCatalog"]
