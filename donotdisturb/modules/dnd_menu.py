from gi.repository import Gtk
from ignis.window_manager import WindowManager

from ...constants import WindowName
from ...services import SettingsManager, SubscriptionGroup
from ...utils import bind_flag, weak_signal

wm = WindowManager.get_default()


class DndMenu(Gtk.MenuButton):
    """
    Panel menu with a do not disturb switch and a shortcut to the preferences window.
    """

    __gtype_name__ = "DndMenu"

    def __init__(self, settings: SettingsManager):
        self.__settings = settings
        self.__specs = SubscriptionGroup()
        super().__init__(css_classes=["flat", "px-1"], tooltip_text="Do Not Disturb")

        self.__switch = Gtk.Switch(valign=Gtk.Align.CENTER)
        label = Gtk.Label(label="Do Not Disturb", xalign=0, hexpand=True)
        row = Gtk.Box(spacing=12)
        row.append(label)
        row.append(self.__switch)

        preferences = Gtk.Button(label="Preferences", css_classes=["flat"])
        weak_signal(preferences, "clicked", self.__on_preferences_clicked)

        box = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=6)
        box.append(row)
        box.append(preferences)
        self.set_popover(Gtk.Popover(child=box))

        self.__subscribe()

    def __subscribe(self):
        settings = self.__settings
        self.__specs.add(
            bind_flag(
                settings.is_do_not_disturb,
                settings.on_do_not_disturb_changed,
                self.__switch,
                "active",
                setter=settings.set_do_not_disturb,
            )
        )
        self.__specs.weak(settings.on_do_not_disturb_changed, self.__on_changed)
        self.__on_changed()

    def do_realize(self):
        if len(self.__specs) == 0:
            self.__subscribe()
        super().do_realize()

    def do_unrealize(self):
        self.__specs.clear()
        super().do_unrealize()

    def __on_changed(self, *_):
        if self.__settings.is_do_not_disturb():
            self.set_icon_name("notifications-disabled-symbolic")
        else:
            self.set_icon_name("notifications-symbolic")

    def __on_preferences_clicked(self, *_):
        self.popdown()
        wm.open_window(WindowName.preferences.value)
