from typing import Callable

from gi.repository import Adw
from ignis.app import IgnisApp

from .constants import PreferenceRow, WindowName
from .services import SettingsManager, Subscription
from .utils import bind_flag
from .widgets import AdwRegularWindow


class Preferences(AdwRegularWindow):
    __gtype_name__ = "DndPreferences"

    class View(Adw.PreferencesPage):
        __gtype_name__ = "DndPreferencesView"

        def __init__(self):
            super().__init__()

            group = Adw.PreferencesGroup(title="Do Not Disturb")
            self.add(group)

            self.rows: dict[PreferenceRow, Adw.SwitchRow] = {}
            for pref in PreferenceRow:
                row = Adw.SwitchRow(title=pref.title, subtitle=pref.tooltip, tooltip_text=pref.tooltip)
                self.rows[pref] = row
                group.add(row)

        def bind_settings(self, settings: SettingsManager) -> list[Subscription]:
            accessors: dict[PreferenceRow, tuple[Callable, Callable, Callable]] = {
                PreferenceRow.show_icon: (
                    settings.should_show_icon,
                    settings.on_show_icon_changed,
                    settings.set_show_icon,
                ),
                PreferenceRow.mute_sounds: (
                    settings.should_mute_sound,
                    settings.on_mute_sound_changed,
                    settings.set_should_mute_sound,
                ),
                PreferenceRow.hide_dot: (
                    settings.should_hide_notification_dot,
                    settings.on_hide_notification_dot_changed,
                    settings.set_should_hide_notification_dot,
                ),
            }
            return [
                bind_flag(getter, subscribe, self.rows[pref], "active", setter=setter)
                for pref, (getter, subscribe, setter) in accessors.items()
            ]

    def __init__(self, settings: SettingsManager):
        super().__init__(
            namespace=WindowName.preferences.value,
            default_width=480,
            default_height=320,
            hide_on_close=True,
            visible=False,
        )

        self.__view = self.View()
        for spec in self.__view.bind_settings(settings):
            self.specs.add(spec)

        toolbar = Adw.ToolbarView(content=self.__view)
        toolbar.add_top_bar(Adw.HeaderBar())
        self.set_content(toolbar)
        self.set_title("Do Not Disturb Preferences")
        self.set_application(IgnisApp.get_initialized())
