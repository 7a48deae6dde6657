from .dnd_indicator import DndIndicator
from .dnd_menu import DndMenu
from .notification_dot import NotificationDot


__all__ = [DndIndicator, DndMenu, NotificationDot]
