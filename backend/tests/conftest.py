import uuid

import pytest

from vibes.dependencies import create_runtime
from vibes.skills import registry
from vibes.skills.base import SkillContext
from vibes.stores.calendar import CalendarStore
from vibes.stores.catalog import CatalogStore
from vibes.stores.todos import TodoStore


@pytest.fixture(autouse=True)
def _fresh_registry():
    registry.clear_cache()
    yield
    registry.clear_cache()


@pytest.fixture
def todo_store():
    return TodoStore()


@pytest.fixture
def calendar_store():
    return CalendarStore()


@pytest.fixture
def catalog_store():
    return CatalogStore()


@pytest.fixture
def sample_menu():
    return {
        "appetizers": [{"name": "Soup", "price": 5, "type": "veg"}],
        "mains": [{"name": "Steak", "price": 24.5, "type": "Portion"}],
    }


@pytest.fixture
def skill_context(todo_store, calendar_store, sample_menu):
    return SkillContext(
        user_id=str(uuid.uuid4()),
        agent_id="charles",
        skill_data_context=[{"id": "menu", "data": sample_menu}],
        todos=todo_store,
        calendar=calendar_store,
        locale="de-DE",
    )


@pytest.fixture
def runtime():
    return create_runtime()


@pytest.fixture
def agents_dir(tmp_path):
    (tmp_path / "lean.toml").write_text(
        """
[agent]
id = "lean"
name = "Lean"
locale = "en-US"

[[skills]]
id = "show-menu"

[[skills.data_context]]
id = "menu"

[[skills]]
id = "view-calendar"
""",
        encoding="utf-8",
    )
    return tmp_path
