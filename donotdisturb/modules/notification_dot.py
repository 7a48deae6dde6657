from gi.repository import GLib
from ignis.services.notifications import Notification, NotificationService
from ignis.widgets import Box

from ...services import SettingsManager, Subscription, SubscriptionGroup
from ...utils import weak_signal


class NotificationDot(Box):
    """
    Marks pending notifications; hidden under do not disturb when ``hide-dot`` is set.
    """

    __gtype_name__ = "DndNotificationDot"

    def __init__(self, settings: SettingsManager):
        self.__settings = settings
        self.__service = NotificationService.get_default()
        self.__specs = SubscriptionGroup()
        self.__closed_specs: dict[Notification, Subscription] = {}
        super().__init__(
            css_classes=["notification-dot"],
            valign="center",
            tooltip_text="Unread notifications",
        )

        self.__subscribe()

    def __subscribe(self):
        self.__specs.weak(self.__settings.on_do_not_disturb_changed, self.__on_changed)
        self.__specs.weak(self.__settings.on_hide_notification_dot_changed, self.__on_changed)
        self.__specs.add(weak_signal(self.__service, "notified", self.__on_notified))
        self.__specs.add(weak_signal(self.__service, "notify::notifications", self.__on_changed))

        for notify in self.__service.notifications:
            self.__watch(notify)
        self.__on_changed()

    def __release(self):
        self.__specs.clear()
        for spec in self.__closed_specs.values():
            spec.disconnect()
        self.__closed_specs.clear()

    def do_realize(self):
        if len(self.__specs) == 0:
            self.__subscribe()
        super().do_realize()

    def do_unrealize(self):
        self.__release()
        super().do_unrealize()

    def __watch(self, notify: Notification):
        if notify not in self.__closed_specs:
            self.__closed_specs[notify] = weak_signal(notify, "closed", self.__on_closed)

    def __should_hide(self) -> bool:
        return self.__settings.is_do_not_disturb() and self.__settings.should_hide_notification_dot()

    def __on_changed(self, *_):
        has_notifications = len(self.__service.notifications) != 0
        self.set_visible(has_notifications and not self.__should_hide())

    def __on_notified(self, _, notify: Notification):
        self.__watch(notify)
        self.__on_changed()

    def __on_closed(self, notify: Notification, *_):
        spec = self.__closed_specs.pop(notify, None)
        if spec:
            spec.disconnect()
        # the service drops the notification after emitting ``closed``
        GLib.idle_add(self.__on_changed)
