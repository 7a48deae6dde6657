import gc
import weakref

from donotdisturb.services import Subscription, SubscriptionGroup, WeakMethodCallback


def test_subscription_releases_once():
    released = []
    subscription = Subscription("show-icon", lambda: released.append(True))

    assert subscription.key == "show-icon"
    assert subscription.connected

    subscription.disconnect()
    subscription.disconnect()

    assert released == [True]
    assert not subscription.connected


def test_dropping_a_subscription_keeps_it_connected():
    released = []
    Subscription("show-icon", lambda: released.append(True))

    assert released == []


def test_subscription_group_clears_all():
    released = []
    group = SubscriptionGroup()
    first = group.add(Subscription("show-icon", lambda: released.append("show-icon")))
    group.add(Subscription("hide-dot", lambda: released.append("hide-dot")))
    first.disconnect()

    assert len(group) == 2

    group.clear()

    assert released == ["show-icon", "hide-dot"]
    assert len(group) == 0


def test_subscription_group_through_store(app_store):
    calls = []
    group = SubscriptionGroup()
    group.add(app_store.subscribe("hide-dot", lambda: calls.append(True)))

    app_store.set("hide-dot", True)
    group.clear()
    app_store.set("hide-dot", False)

    assert calls == [True]


class Owner:
    def __init__(self):
        self.calls = 0

    def on_changed(self, *_):
        self.calls += 1


def test_weak_subscription_calls_live_owner(settings):
    owner = Owner()
    group = SubscriptionGroup()
    group.weak(settings.on_show_icon_changed, owner.on_changed)

    settings.set_show_icon(False)

    assert owner.calls == 1


def test_weak_subscription_does_not_keep_owner_alive(settings, app_store):
    owner = Owner()
    ref = weakref.ref(owner)
    SubscriptionGroup().weak(settings.on_show_icon_changed, owner.on_changed)

    del owner
    gc.collect()

    assert ref() is None
    assert len(app_store.callbacks["show-icon"]) == 1

    # the first change after the owner is gone releases the subscription
    settings.set_show_icon(False)

    assert app_store.callbacks["show-icon"] == []


def test_weak_subscription_released_by_group(settings, app_store):
    owner = Owner()
    group = SubscriptionGroup()
    group.weak(settings.on_hide_notification_dot_changed, owner.on_changed)

    group.clear()
    settings.set_should_hide_notification_dot(True)

    assert owner.calls == 0
    assert app_store.callbacks["hide-dot"] == []


def test_weak_method_callback_alive():
    owner = Owner()
    callback = WeakMethodCallback(owner.on_changed)

    assert callback.alive

    callback()
    del owner
    gc.collect()

    assert not callback.alive
    assert callback() is None
