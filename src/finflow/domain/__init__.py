"""Domain layer for finflow application.

Only the pure core is exported here; services that touch the database are
imported from their own modules to avoid circular imports.
"""

from finflow.domain.normalizer import normalize
from finflow.domain.periods import bounds
from finflow.domain.query import query
from finflow.domain.summary import totals
from finflow.domain.reconcile import merge

__all__ = [
    "normalize",
    "bounds",
    "query",
    "totals",
    "merge",
]
