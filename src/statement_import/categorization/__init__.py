"""Transaction categorization utilities.

Rule-based and local (no network calls), validated against a read-only
category registry supplied by the ledger.
"""

from .registry import Category, CategoryRegistry, default_registry
from .rules import categorize, fold_text

__all__ = ["Category", "CategoryRegistry", "categorize", "default_registry", "fold_text"]
