# tests/unit/core/test_container_properties.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from unittest.mock import MagicMock

import pytest
from hypothesis import HealthCheck, assume, given, settings
from hypothesis import strategies as st

from obsmap.core.config import ConfigRegistry, NotificationHooks
from obsmap.core.container import ObservableMap

keys = st.one_of(st.text(), st.integers())
scalars = st.one_of(st.none(), st.booleans(), st.integers(), st.floats(allow_nan=False), st.text(), st.binary())
values = st.one_of(scalars, st.lists(st.integers(), max_size=3))

# The autouse registry reset does not touch the private registries used here.
property_settings = settings(suppress_health_check=[HealthCheck.function_scoped_fixture])


def _observed():
    emit = MagicMock()
    m = ObservableMap(registry=ConfigRegistry(NotificationHooks(emit=emit)))
    return m, emit


def _names(emit):
    return [(c.args[1], c.args[2].key, c.args[2].element) for c in emit.call_args_list]


@pytest.mark.property
@property_settings
@given(key=keys, first=scalars, second=scalars)
def test_replacing_emits_remove_then_add(key, first, second):
    assume(not (type(first) is type(second) and first == second))
    m, emit = _observed()
    m.set(key, first)
    emit.reset_mock()

    m.set(key, second)

    assert _names(emit) == [("remove", str(key), first), ("add", str(key), second)]


@pytest.mark.property
@property_settings
@given(key=keys, value=values)
def test_setting_same_value_twice_emits_once(key, value):
    m, emit = _observed()
    m.set(key, value)
    m.set(key, value)
    assert emit.call_count == 1


@pytest.mark.property
@property_settings
@given(key=keys, value=scalars)
def test_setting_equal_scalar_copy_emits_nothing(key, value):
    m, emit = _observed()
    m.set(key, value)
    emit.reset_mock()
    m.set(key, type(value)(value) if value is not None else None)
    emit.assert_not_called()


@pytest.mark.property
@property_settings
@given(present=st.dictionaries(st.text(), values), key=st.text())
def test_removing_absent_key_changes_nothing(present, key):
    assume(key not in present)
    m, emit = _observed()
    m.to_object().update(present)
    snapshot = dict(present)

    m.remove(key)

    emit.assert_not_called()
    assert m.to_object() == snapshot


@pytest.mark.property
@property_settings
@given(entries=st.dictionaries(st.text(), values))
def test_get_all_is_an_equal_copy(entries):
    m, _ = _observed()
    m.set_all(entries)
    result = m.get_all()
    assert result is not m.to_object()
    assert result == m.to_object()
    assert list(result) == list(m.to_object())
