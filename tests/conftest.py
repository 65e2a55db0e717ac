import copy
import pytest
from appseed.seed import DEFAULT_APP
from appseed.storage import InMemoryStorage, SQLiteStorage


@pytest.fixture
def app_doc():
    return copy.deepcopy(DEFAULT_APP)


@pytest.fixture(params=["memory", "sqlite"])
def store(request, tmp_path):
    if request.param == "memory":
        s = InMemoryStorage()
    else:
        s = SQLiteStorage(str(tmp_path / "apps.db"))
    yield s
    s.close()
