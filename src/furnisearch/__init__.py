"""Product search and ranking for the furniture storefront catalog."""

from furnisearch.index.search import search
from furnisearch.index.suggest import suggest

__all__ = ["search", "suggest"]
