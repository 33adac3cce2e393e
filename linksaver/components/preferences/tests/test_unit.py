import pytest

from linksaver.adapters.memory import InMemoryPreferenceStore
from linksaver.components.preferences import (
    DARK_MODE_KEY,
    ThemePreferences,
    run_load_dark_mode,
    run_toggle_dark_mode,
)


@pytest.fixture
def store() -> InMemoryPreferenceStore:
    return InMemoryPreferenceStore()


@pytest.fixture
def prefs(store) -> ThemePreferences:
    return ThemePreferences(store)


def test_load_defaults_to_light(prefs):
    assert run_load_dark_mode(prefs).dark_mode is False


def test_load_reads_stored_value(store, prefs):
    store.set_bool(DARK_MODE_KEY, True)
    assert run_load_dark_mode(prefs).dark_mode is True
    assert prefs.is_dark_mode is True


def test_toggle_twice_round_trips(store, prefs):
    prefs.load()
    original = prefs.is_dark_mode

    first = run_toggle_dark_mode(prefs)
    assert first.dark_mode is not original
    assert store.get_bool(DARK_MODE_KEY) == prefs.is_dark_mode

    second = run_toggle_dark_mode(prefs)
    assert second.dark_mode is original
    assert store.get_bool(DARK_MODE_KEY) == prefs.is_dark_mode


def test_toggle_notifies_subscribers(prefs):
    seen: list[bool] = []
    unsubscribe = prefs.subscribe(seen.append)

    prefs.toggle()
    prefs.toggle()
    unsubscribe()
    prefs.toggle()

    assert seen == [True, False]


def test_failed_write_keeps_value():
    class ReadOnlyStore(InMemoryPreferenceStore):
        def set_bool(self, key: str, value: bool) -> None:
            raise OSError("disk full")

    prefs = ThemePreferences(ReadOnlyStore())
    result = run_toggle_dark_mode(prefs)

    assert result.success is False
    assert result.dark_mode is False
    assert prefs.is_dark_mode is False
