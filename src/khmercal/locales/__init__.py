from .table import LocaleTable
from .km import KM

__all__ = ["LocaleTable", "KM"]
