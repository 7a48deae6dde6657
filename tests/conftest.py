from typing import Callable

import pytest

from donotdisturb.services import BooleanStore, SettingsManager, Subscription


class MemoryStore(BooleanStore):
    """
    Applies writes synchronously and notifies subscribers of the written key.
    """

    def __init__(self, **values: bool):
        self.values = {key.replace("_", "-"): value for key, value in values.items()}
        self.callbacks: dict[str, list[Callable[[], object]]] = {}
        self.writes: list[tuple[str, bool]] = []

    def get(self, key: str) -> bool:
        return self.values[key]

    def set(self, key: str, value: bool):
        self.writes.append((key, value))
        self.values[key] = value
        self.emit(key)

    def emit(self, key: str):
        for callback in list(self.callbacks.get(key, [])):
            callback()

    def subscribe(self, key: str, callback: Callable[[], object]) -> Subscription:
        self.callbacks.setdefault(key, []).append(callback)
        return Subscription(key, lambda: self.callbacks[key].remove(callback))


class FakeMixer:
    def __init__(self):
        self.calls: list[str] = []

    def mute(self):
        self.calls.append("mute")

    def unmute(self):
        self.calls.append("unmute")


@pytest.fixture
def app_store() -> MemoryStore:
    return MemoryStore(show_icon=True, mute_sounds=False, hide_dot=False)


@pytest.fixture
def notification_store() -> MemoryStore:
    return MemoryStore(show_banners=True)


@pytest.fixture
def sound_store() -> MemoryStore:
    return MemoryStore(event_sounds=True)


@pytest.fixture
def mixer() -> FakeMixer:
    return FakeMixer()


@pytest.fixture
def settings(app_store, notification_store, sound_store, mixer) -> SettingsManager:
    return SettingsManager(app_store, notification_store, sound_store, mixer)
