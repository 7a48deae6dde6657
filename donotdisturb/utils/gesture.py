import weakref
from typing import Any, Callable

from gi.repository import Gdk, Gtk


def set_on_click[Widget: Gtk.Widget](
    widget: Widget,
    left: Callable[[Widget], Any] | None = None,
    right: Callable[[Widget], Any] | None = None,
) -> Widget:
    """
    Invokes ``left``/``right`` with the widget when a click is released inside it.
    """
    ref = weakref.ref(widget)

    def on_released(callback: Callable[[Widget], Any]):
        def handler(gesture_click: Gtk.GestureClick, n_press: int, x: float, y: float):
            widget = ref()
            if widget and widget.contains(x, y):
                gesture_click.set_state(Gtk.EventSequenceState.CLAIMED)
                return callback(widget)

        return handler

    for button, callback in [(Gdk.BUTTON_PRIMARY, left), (Gdk.BUTTON_SECONDARY, right)]:
        if callback:
            controller = Gtk.GestureClick(button=button)
            widget.add_controller(controller)
            controller.connect("released", on_released(callback))

    return widget
