"""
Pytest configuration and fixtures for monument_safezones tests.

Unit tests exercise parsing, state and geometry directly. Integration tests
drive the addon through the callbacks registered with a mock host.
"""

from __future__ import annotations

import logging

import pytest

from monument_safezones.addon import SafeZonesAddon
from monument_safezones.lang import default_messages
from monument_safezones.testing import MockHost, MockLang, MockPlayer


def pytest_configure(config: pytest.Config) -> None:
    """Pytest configuration."""
    logging.getLogger("monument_safezones").setLevel(logging.DEBUG)


def pytest_collection_modifyitems(config: pytest.Config, items: list) -> None:
    """Auto-apply markers based on test path."""
    for item in items:
        path_str = str(item.path)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Undo configure_logging() so caplog keeps seeing package records."""
    yield
    root = logging.getLogger("monument_safezones")
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    root.propagate = True
    root.setLevel(logging.DEBUG)


@pytest.fixture
def player():
    """Player that records replies and draw commands."""
    return MockPlayer()


@pytest.fixture
def host():
    """Host plugin that accepts registrations."""
    return MockHost()


@pytest.fixture
def lang_service():
    """Lang service loaded with the English catalog."""
    service = MockLang()
    service.register_messages(default_messages(), None)
    return service


@pytest.fixture
def addon(host, lang_service):
    """Addon wired to the mock host and lang service."""
    return SafeZonesAddon(host=host, lang_service=lang_service)


@pytest.fixture
def registered_addon(addon, host):
    """Addon after server initialization, registered with the host."""
    assert addon.on_server_initialized()
    return addon
