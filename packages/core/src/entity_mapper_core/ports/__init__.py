from .adapter import IAdapter
from .query import IQuery, MutableScope

__all__ = [
    "IAdapter",
    "IQuery",
    "MutableScope",
]
