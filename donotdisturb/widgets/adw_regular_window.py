from gi.repository import Adw
from ignis.exceptions import WindowNotFoundError
from ignis.gobject import IgnisProperty
from ignis.window_manager import WindowManager

from ..services import SubscriptionGroup

wm = WindowManager.get_default()


class AdwRegularWindow(Adw.Window):
    """
    An ``Adw.Window`` registered with the ignis window manager, so that
    ``ignis open-window <namespace>`` reaches it.

    Subscriptions added to ``specs`` are released when the window is destroyed,
    or unrealized unless it only hides on close.
    """

    __gtype_name__ = "DndAdwRegularWindow"

    def __init__(self, namespace: str, *args, **kwargs):
        super().__init__(*args, **kwargs)

        self._namespace = namespace
        self._specs = SubscriptionGroup()
        wm.add_window(namespace, self)

        self.connect("close-request", self.__class__.__on_close_request)

    @IgnisProperty
    def namespace(self) -> str:
        return self._namespace

    @property
    def specs(self) -> SubscriptionGroup:
        return self._specs

    def __remove(self):
        self._specs.clear()
        try:
            wm.remove_window(self.namespace)
        except WindowNotFoundError:
            pass

    def __on_close_request(self, *_):
        if not self.get_hide_on_close():
            self.__remove()

    def do_unrealize(self):
        if not self.get_hide_on_close():
            self.__remove()
        super().do_unrealize()

    def destroy(self):
        self.__remove()
        super().destroy()
