"""Core domain module for closestdata.

This module contains the lookup algorithm, its domain models and the port
definitions it depends on. Concrete I/O lives in closestdata.adapters.
"""

from closestdata.core.models import ClosestDataResult, DataReader
from closestdata.core.ports import DataReaderPort, FileSystemPort, ResultCachePort
from closestdata.core.services import ClosestDataResolver


__all__ = [
    "ClosestDataResolver",
    "ClosestDataResult",
    "DataReader",
    "DataReaderPort",
    "FileSystemPort",
    "ResultCachePort",
]
