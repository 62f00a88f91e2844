import pytest

from hoyowiki_data import config
from hoyowiki_data.categories import clear_category_cache


@pytest.fixture(autouse=True)
def fresh_settings():
    config._settings = None
    clear_category_cache()
    yield
    config._settings = None
    clear_category_cache()
