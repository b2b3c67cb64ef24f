"""Tabular container for bulk profile import and export."""

from profilekit.tabular.base import DataColumn, DataSet, DataTable

__all__ = [
    "DataColumn",
    "DataSet",
    "DataTable",
]
