import pytest

from selectorkit import css_selector_builder


@pytest.fixture
def builder():
    return css_selector_builder


@pytest.fixture
def clean_env(monkeypatch):
    """Remove selectorkit variables and stop .env files from leaking in."""
    for name in ('SELECTORKIT_LOG_LEVEL', 'SELECTORKIT_SERVICE_NAME', 'LOGFIRE_TOKEN'):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr('selectorkit.config.load_dotenv', lambda: False)
    return monkeypatch


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line('markers', 'integration: marks tests as integration tests')
    config.addinivalue_line('markers', 'unit: marks tests as unit tests')


def pytest_collection_modifyitems(config, items):
    """Apply directory-based marks to collected test items."""

    for item in items:
        if hasattr(item, 'fspath'):
            file_path = str(item.fspath)

            if '/tests/integration/' in file_path:
                item.add_marker(pytest.mark.integration)
            elif '/tests/unit/' in file_path:
                item.add_marker(pytest.mark.unit)
