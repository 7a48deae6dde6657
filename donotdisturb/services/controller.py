from loguru import logger

from .settings import SettingsManager
from .store import SubscriptionGroup


class DoNotDisturbController:
    """
    Mutes the master channel while do not disturb is enabled, if ``mute-sounds`` is set.

    Only audio muted by this controller is unmuted again. Repeated notifications
    of an unchanged state are ignored.
    """

    def __init__(self, settings: SettingsManager):
        self.__settings = settings
        self.__specs = SubscriptionGroup()
        self._enabled = settings.is_do_not_disturb()
        self._muted = False

        self.__specs.add(settings.on_do_not_disturb_changed(self.__on_changed))

    @property
    def muted(self) -> bool:
        return self._muted

    def dispose(self):
        self.__specs.clear()

    def __on_changed(self):
        enabled = self.__settings.is_do_not_disturb()
        if enabled == self._enabled:
            return
        self._enabled = enabled

        if enabled:
            if self.__settings.should_mute_sound():
                logger.debug("muting all sounds for do not disturb")
                self.__settings.mute_all_sounds()
                self._muted = True
        elif self._muted:
            logger.debug("unmuting all sounds after do not disturb")
            self.__settings.unmute_all_sounds()
            self._muted = False
