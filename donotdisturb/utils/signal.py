from typing import Callable

from gi.repository import GObject

from ..services import Subscription, WeakMethodCallback


def weak_signal(gobject: GObject.Object, signal: str, method: Callable, *args) -> Subscription:
    """
    Connects ``method`` weakly to ``signal`` of ``gobject``.

    The returned subscription disconnects the handler. If the instance bound to
    ``method`` is collected first, the handler disconnects itself on the next emission.

    Example:

    .. code-block:: python

        specs.add(weak_signal(service, "notified", self.on_notified))
    """
    callback = WeakMethodCallback(method)
    spec = gobject.connect(signal, callback, *args)

    def release():
        if gobject.handler_is_connected(spec):
            gobject.disconnect(spec)

    callback.subscription = Subscription(signal, release)
    return callback.subscription
