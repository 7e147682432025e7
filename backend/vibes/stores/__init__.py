from vibes.stores.base import InMemoryStore
from vibes.stores.calendar import CalendarStore
from vibes.stores.catalog import CatalogStore
from vibes.stores.todos import TodoStore

__all__ = ["InMemoryStore", "CalendarStore", "CatalogStore", "TodoStore"]
