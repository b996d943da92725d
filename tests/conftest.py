import pytest

from stormurl.config import StormUrlConfiguration

MARKERS: tuple[str, ...] = (
    "encoding",
    "paths",
    "query",
    "flags",
    "parser",
    "builder",
    "generator",
    "config",
)


def pytest_configure(config):
    for marker in MARKERS:
        config.addinivalue_line("markers", f"{marker}: tests for stormurl {marker}")


@pytest.fixture
def default_config() -> StormUrlConfiguration:
    return StormUrlConfiguration()


@pytest.fixture
def clear_config_cache():
    StormUrlConfiguration.config_file.cache_clear()
    yield
    StormUrlConfiguration.config_file.cache_clear()
