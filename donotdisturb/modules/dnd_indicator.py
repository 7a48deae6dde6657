from ignis.widgets import Box, Icon

from ...services import SettingsManager, SubscriptionGroup
from ...utils import set_on_click


class DndIndicator(Box):
    """
    Panel icon shown while do not disturb is enabled, unless ``show-icon`` is off.
    """

    __gtype_name__ = "DndIndicator"

    def __init__(self, settings: SettingsManager):
        self.__settings = settings
        self.__specs = SubscriptionGroup()
        super().__init__(
            css_classes=["hover", "px-1", "rounded", "warning"],
            tooltip_text="Do Not Disturb enabled",
            child=[Icon(image="notifications-disabled-symbolic")],
        )

        set_on_click(self, left=self.__class__.__on_clicked)
        self.__subscribe()

    def __subscribe(self):
        self.__specs.weak(self.__settings.on_do_not_disturb_changed, self.__on_changed)
        self.__specs.weak(self.__settings.on_show_icon_changed, self.__on_changed)
        self.__on_changed()

    def do_realize(self):
        if len(self.__specs) == 0:
            self.__subscribe()
        super().do_realize()

    def do_unrealize(self):
        self.__specs.clear()
        super().do_unrealize()

    def __on_changed(self, *_):
        self.set_visible(self.__settings.is_do_not_disturb() and self.__settings.should_show_icon())

    def __on_clicked(self, *_):
        self.__settings.toggle_do_not_disturb()
