import sys, os
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import importlib.util

import pytest

from unlimited_timeout import (
    BRAND,
    MiniLoop,
    Timeout,
    clear_interval,
    clear_timeout,
    is_handle,
    set_interval,
    set_timeout,
)

PACKAGE_DIR = os.path.abspath(
    os.path.join(os.path.dirname(__file__), "..", "unlimited_timeout")
)


def load_second_copy():
    """Import the package again under another name, like a duplicated dependency."""
    spec = importlib.util.spec_from_file_location(
        "unlimited_timeout_copy",
        os.path.join(PACKAGE_DIR, "__init__.py"),
        submodule_search_locations=[PACKAGE_DIR],
    )
    module = importlib.util.module_from_spec(spec)
    sys.modules[spec.name] = module
    spec.loader.exec_module(module)
    return module


class CountingRef:
    def __init__(self):
        self.cancels = 0

    def cancel(self):
        self.cancels += 1


class LookAlike:
    """Shaped like a handle but not created by this package."""

    def __init__(self):
        self.id = CountingRef()
        self.cleared = False


class Hostile:
    def __getattr__(self, name):
        raise RuntimeError(name)


@pytest.mark.parametrize("clear", [clear_timeout, clear_interval])
@pytest.mark.parametrize("value", [None, 0, "", "timer", 42, [], {}, object()])
def test_ignores_non_handles(clear, value):
    """Clearing arbitrary values is a silent no-op."""
    clear(value)


def test_ignores_objects_with_raising_attributes():
    """Attribute errors on foreign objects never escape."""
    assert not is_handle(Hostile())
    clear_timeout(Hostile())
    clear_interval(Hostile())


@pytest.mark.parametrize("clear", [clear_timeout, clear_interval])
def test_does_not_touch_look_alikes(clear):
    """Objects shaped like handles but without the brand are left alone."""
    fake = LookAlike()
    clear(fake)
    assert fake.cleared is False
    assert fake.id.cancels == 0


@pytest.mark.parametrize("clear", [clear_timeout, clear_interval])
def test_does_not_touch_dicts(clear):
    """Dicts are never treated as handles, even with the brand key."""
    fake = {"id": CountingRef(), "cleared": False, BRAND: True}
    clear(fake)
    assert fake["cleared"] is False
    assert fake["id"].cancels == 0


def test_brand_must_be_true():
    """Only a brand value of True identifies a handle."""
    fake = LookAlike()
    setattr(fake, BRAND, "yes")
    assert not is_handle(fake)
    clear_timeout(fake)
    assert fake.cleared is False


def test_can_clear_multiple_times():
    """Clearing twice is harmless."""
    loop = MiniLoop(virtual=True)
    timeout = set_timeout(lambda: None, 100, host=loop)
    host_timer = timeout.id
    clear_timeout(timeout)
    clear_timeout(timeout)
    timeout.cancel()

    assert timeout.cleared is True
    assert timeout.id is None
    assert host_timer.cancelled()


def test_clear_functions_are_interchangeable():
    """clear_timeout and clear_interval accept either flavour."""
    loop = MiniLoop(virtual=True)
    fired = []
    timeout = set_timeout(fired.append, 10, "t", host=loop)
    interval = set_interval(fired.append, 10, "i", host=loop)
    clear_interval(timeout)
    clear_timeout(interval)
    loop.run()

    assert fired == []
    assert timeout.id is None
    assert interval.id is None


def test_clear_from_own_callback():
    """A callback may clear its own handle."""
    loop = MiniLoop(virtual=True)
    seen = []

    def once():
        seen.append(timeout.id)
        clear_timeout(timeout)

    timeout = set_timeout(once, 5, host=loop)
    loop.run()
    assert len(seen) == 1
    assert timeout.cleared is True


def test_handles_from_another_copy():
    """Handles from a second copy of the package are recognised both ways."""
    copy = load_second_copy()
    try:
        assert copy.Timeout is not Timeout

        loop = MiniLoop(virtual=True)
        fired = []
        foreign_timeout = copy.set_timeout(fired.append, 10, "t", host=loop)
        foreign_interval = copy.set_interval(fired.append, 10, "i", host=loop)

        assert is_handle(foreign_timeout)
        clear_timeout(foreign_timeout)
        clear_interval(foreign_interval)
        loop.run()

        assert fired == []
        assert foreign_timeout.cleared is True
        assert foreign_timeout.id is None
        assert foreign_interval.cleared is True

        local = set_timeout(fired.append, 10, "l", host=loop)
        copy.clear_timeout(local)
        assert local.cleared is True
    finally:
        for name in list(sys.modules):
            if name == "unlimited_timeout_copy" or name.startswith("unlimited_timeout_copy."):
                del sys.modules[name]
