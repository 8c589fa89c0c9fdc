# tests/conftest.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from unittest.mock import MagicMock

import pytest

from obsmap.core.config import ConfigRegistry, NotificationHooks, default_registry
from obsmap.core.extensions import ExtensionRegistry


def pytest_configure(config):
    """Register custom marks."""
    config.addinivalue_line("markers", "property: mark test as a property-based test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")


@pytest.fixture(autouse=True)
def reset_default_registry():
    """Every test starts and ends with the no-op process-wide hooks."""
    default_registry.reset()
    yield
    default_registry.reset()


@pytest.fixture
def spy_hooks():
    """A full hook set made of MagicMocks."""
    return NotificationHooks(
        emit=MagicMock(name="emit"),
        on=MagicMock(name="on"),
        remove_listener=MagicMock(name="remove_listener"),
        remove_all_listeners=MagicMock(name="remove_all_listeners"),
    )


@pytest.fixture
def registry(spy_hooks):
    """A private registry configured with spy hooks."""
    return ConfigRegistry(spy_hooks)


@pytest.fixture
def emit(spy_hooks):
    return spy_hooks.emit


@pytest.fixture
def container(registry):
    """An empty container resolving hooks through the spy registry."""
    from obsmap.core.container import ObservableMap

    return ObservableMap(registry=registry)


@pytest.fixture
def extensions():
    """A private extension registry so applications do not leak between tests."""
    return ExtensionRegistry()


@pytest.fixture
def host_class():
    """A throwaway ObservableMap subclass to extend."""
    from obsmap.core.container import ObservableMap

    class Host(ObservableMap):
        pass

    return Host


@pytest.fixture
def emitted(emit):
    """Return a callable listing the (event_name, payload) pairs emitted so far."""
    return lambda: [(c.args[1], c.args[2]) for c in emit.call_args_list]
