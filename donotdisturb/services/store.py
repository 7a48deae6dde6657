import weakref
from abc import ABC, abstractmethod
from typing import Callable


class Subscription:
    """
    Keeps a change subscription and releases it on ``disconnect``.

    Unlike a signal spec, dropping the handle does not disconnect:
    owners release subscriptions explicitly when they are torn down.
    """

    def __init__(self, key: str, release: Callable[[], None]):
        self.__key = key
        self.__release: Callable[[], None] | None = release

    @property
    def key(self) -> str:
        return self.__key

    @property
    def connected(self) -> bool:
        return self.__release is not None

    def disconnect(self):
        if self.__release:
            release = self.__release
            self.__release = None
            release()


class WeakMethodCallback:
    """
    Holds a weak reference to an instance method and calls it while the instance lives.

    Once the instance is gone, the first invocation releases ``subscription`` instead,
    so a long-lived store never keeps a widget alive.

    Example:

    .. code-block:: python

        callback = WeakMethodCallback(self.on_changed)
        callback.subscription = settings.on_show_icon_changed(callback)
    """

    def __init__(self, method: Callable):
        self.__method = weakref.WeakMethod(method)
        self.subscription: Subscription | None = None

    @property
    def alive(self) -> bool:
        return self.__method() is not None

    def __call__(self, *args):
        method = self.__method()
        if method:
            return method(*args)
        elif self.subscription:
            self.subscription.disconnect()


class SubscriptionGroup:
    """
    Collects subscriptions of a single owner, e.g. a widget, to release them at once.
    """

    def __init__(self):
        self._subscriptions: list[Subscription] = []

    def __len__(self) -> int:
        return len(self._subscriptions)

    def add(self, subscription: Subscription) -> Subscription:
        self._subscriptions.append(subscription)
        return subscription

    def weak(self, subscribe: Callable[[Callable[[], object]], Subscription], method: Callable) -> Subscription:
        """
        Subscribes ``method`` through a ``WeakMethodCallback`` and keeps the subscription.
        """
        callback = WeakMethodCallback(method)
        callback.subscription = subscribe(callback)
        return self.add(callback.subscription)

    def clear(self):
        for subscription in self._subscriptions:
            subscription.disconnect()
        self._subscriptions.clear()


class BooleanStore(ABC):
    """
    A per-key boolean store with change subscriptions.
    """

    @abstractmethod
    def get(self, key: str) -> bool: ...

    @abstractmethod
    def set(self, key: str, value: bool): ...

    @abstractmethod
    def subscribe(self, key: str, callback: Callable[[], object]) -> Subscription:
        """
        Invokes ``callback`` without arguments whenever ``key`` changes, whoever wrote it.
        """
