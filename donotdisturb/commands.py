from ignis.command_manager import CommandManager
from ignis.exceptions import WindowNotFoundError
from ignis.window_manager import WindowManager

from .constants import WindowName
from .services import SettingsManager

cm = CommandManager.get_default()
wm = WindowManager.get_default()


def open_window(window_name: WindowName):
    try:
        wm.open_window(window_name.value)
    except WindowNotFoundError:
        pass


def register_commands(settings: SettingsManager):
    """
    Registers commands for ``ignis run-command``.
    """

    @cm.command(name="toggle-do-not-disturb")
    def toggle_do_not_disturb(*_):
        settings.toggle_do_not_disturb()

    @cm.command(name="enable-do-not-disturb")
    def enable_do_not_disturb(*_):
        settings.set_do_not_disturb(True)

    @cm.command(name="disable-do-not-disturb")
    def disable_do_not_disturb(*_):
        settings.set_do_not_disturb(False)

    @cm.command(name="open-dnd-preferences")
    def open_preferences(*_):
        open_window(WindowName.preferences)
