from .in_memory_row_store import InMemoryRowStore
from .demo_data import DEMO_ROWS, seed_demo_data

__all__ = ["InMemoryRowStore", "DEMO_ROWS", "seed_demo_data"]
