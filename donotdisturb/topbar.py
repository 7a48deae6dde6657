from gi.repository import Gtk
from ignis.widgets import Window

from .constants import WindowName
from .modules import DndIndicator, DndMenu, NotificationDot
from .services import SettingsManager


class Topbar(Window):
    __gtype_name__ = "DndTopbar"

    def __init__(self, settings: SettingsManager, monitor: int = 0):
        super().__init__(
            namespace=f"{WindowName.top_bar.value}-{monitor}",
            monitor=monitor,
            anchor=["top", "left", "right"],
            exclusivity="exclusive",
            css_classes=["topbar"],
        )

        end = Gtk.Box(spacing=4, halign=Gtk.Align.END)
        end.append(NotificationDot(settings))
        end.append(DndIndicator(settings))
        end.append(DndMenu(settings))

        view = Gtk.CenterBox()
        view.set_end_widget(end)
        self.set_child(view)
