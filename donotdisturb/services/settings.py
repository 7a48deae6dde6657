from typing import Callable

from loguru import logger

from ..constants import SettingsKey
from .mixer import AmixerCommand
from .store import BooleanStore, Subscription


class SettingsManager:
    """
    Reads, writes and watches the do-not-disturb state and the extension preferences.

    Nothing is cached: every read goes to the live store, since the stores
    are shared with the system settings panel and other tools.

    Args:
        app_settings: Store of the extension schema (``show-icon``, ``mute-sounds``, ``hide-dot``).
        notification_settings: Store of ``org.gnome.desktop.notifications``.
        sound_settings: Store of ``org.gnome.desktop.sound``.
        mixer: Command muting the master audio channel.
    """

    def __init__(
        self,
        app_settings: BooleanStore,
        notification_settings: BooleanStore,
        sound_settings: BooleanStore,
        mixer: AmixerCommand,
    ):
        self._app_settings = app_settings
        self._notification_settings = notification_settings
        self._sound_settings = sound_settings
        self._mixer = mixer

    def set_do_not_disturb(self, enabled: bool):
        """
        Hides banners and disables event sounds if ``enabled``, restores both otherwise.

        The two writes are independent; a failure of the second one leaves them diverged.
        """
        logger.info(f"do not disturb {'enabled' if enabled else 'disabled'}")
        self._sound_settings.set(SettingsKey.event_sounds.value, not enabled)
        self._notification_settings.set(SettingsKey.show_banners.value, not enabled)

    def is_do_not_disturb(self) -> bool:
        return not self._notification_settings.get(SettingsKey.show_banners.value)

    def toggle_do_not_disturb(self) -> bool:
        enabled = not self.is_do_not_disturb()
        self.set_do_not_disturb(enabled)
        return enabled

    def on_do_not_disturb_changed(self, callback: Callable[[], object]) -> Subscription:
        return self._notification_settings.subscribe(SettingsKey.show_banners.value, callback)

    def set_show_icon(self, show_icon: bool):
        self._app_settings.set(SettingsKey.show_icon.value, show_icon)

    def should_show_icon(self) -> bool:
        """
        Whether the panel icon is shown while do not disturb is enabled.
        """
        return self._app_settings.get(SettingsKey.show_icon.value)

    def on_show_icon_changed(self, callback: Callable[[], object]) -> Subscription:
        return self._app_settings.subscribe(SettingsKey.show_icon.value, callback)

    def set_should_mute_sound(self, mute_sound: bool):
        self._app_settings.set(SettingsKey.mute_sounds.value, mute_sound)

    def should_mute_sound(self) -> bool:
        """
        Whether all sound is muted while do not disturb is enabled.
        """
        return self._app_settings.get(SettingsKey.mute_sounds.value)

    def on_mute_sound_changed(self, callback: Callable[[], object]) -> Subscription:
        return self._app_settings.subscribe(SettingsKey.mute_sounds.value, callback)

    def set_should_hide_notification_dot(self, hide_dot: bool):
        self._app_settings.set(SettingsKey.hide_dot.value, hide_dot)

    def should_hide_notification_dot(self) -> bool:
        """
        Whether the notification dot is hidden while do not disturb is enabled.
        """
        return self._app_settings.get(SettingsKey.hide_dot.value)

    def on_hide_notification_dot_changed(self, callback: Callable[[], object]) -> Subscription:
        return self._app_settings.subscribe(SettingsKey.hide_dot.value, callback)

    def mute_all_sounds(self):
        """
        Mutes the master channel. Unrelated to the ``event-sounds`` setting; no flag is written.
        """
        self._mixer.mute()

    def unmute_all_sounds(self):
        self._mixer.unmute()
