"""Master data: static lookup tables, mock records and the data provider."""

from material_ai.data.store import DataSnapshot, DataStore

__all__ = ["DataSnapshot", "DataStore"]
