import weakref
from typing import Any, Callable

from gi.repository import GObject

from ..services import Subscription


def bind_flag(
    getter: Callable[[], Any],
    subscribe: Callable[[Callable[[], object]], Subscription],
    target: GObject.Object,
    target_property: str,
    setter: Callable[[Any], object] | None = None,
    transform_to: Callable | None = None,
) -> Subscription:
    """
    Keeps ``target.target_property`` in line with a settings flag.

    With a ``setter``, the binding is bidirectional: changes of the property are written back.
    The returned subscription releases both directions.

    Example:

    .. code-block:: python

        spec = bind_flag(
            settings.should_show_icon, settings.on_show_icon_changed, row, "active", setter=settings.set_show_icon
        )
    """
    ref_target = weakref.ref(target)

    # target.property = transform_to(getter())
    def on_flag_changed():
        target = ref_target()
        if not target:
            return

        value = getter()
        if transform_to:
            value = transform_to(value)
        if target.get_property(target_property) != value:
            target.set_property(target_property, value)

    flag_subscription = subscribe(on_flag_changed)
    on_flag_changed()

    if not setter:
        return flag_subscription

    # setter(target.property)
    def on_property_set(target: GObject.Object, *_):
        value = target.get_property(target_property)
        if getter() != value:
            setter(value)

    spec = target.connect(f"notify::{target_property}", on_property_set)

    def release():
        flag_subscription.disconnect()
        target = ref_target()
        if target:
            target.disconnect(spec)

    return Subscription(flag_subscription.key, release)
