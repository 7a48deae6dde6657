import os
from enum import Enum
from os import path

current_dir = path.dirname(path.realpath(__file__))
CONFIG_DIR = path.dirname(current_dir)
del current_dir

SCHEMA_DIR = os.getenv("DND_SCHEMA_DIR") or path.join(CONFIG_DIR, "schemas")


class SchemaId(Enum):
    extension = "org.gnome.shell.extensions.kylecorry31-do-not-disturb"
    notifications = "org.gnome.desktop.notifications"
    sound = "org.gnome.desktop.sound"


class SettingsKey(Enum):
    show_icon = "show-icon"
    mute_sounds = "mute-sounds"
    hide_dot = "hide-dot"
    show_banners = "show-banners"
    event_sounds = "event-sounds"


class WindowName(Enum):
    top_bar = "dnd-topbar"
    preferences = "dnd-preferences"


class PreferenceRow(Enum):
    show_icon = (
        SettingsKey.show_icon.value,
        "Enabled Icon",
        "Show an indicator icon when do not disturb is enabled.",
    )
    mute_sounds = (
        SettingsKey.mute_sounds.value,
        "Mute Sounds",
        "Mutes all sound when do not disturb is enabled.",
    )
    hide_dot = (
        SettingsKey.hide_dot.value,
        "Hide Notification Dot",
        "Hides the notification dot when do not disturb is enabled.",
    )

    def __init__(self, key: str, title: str, tooltip: str):
        self.key = key
        self.title = title
        self.tooltip = tooltip
