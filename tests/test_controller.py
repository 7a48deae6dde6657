from donotdisturb.services import DoNotDisturbController, SettingsManager


def test_mutes_when_mute_sounds_is_set(settings: SettingsManager, mixer):
    settings.set_should_mute_sound(True)
    controller = DoNotDisturbController(settings)

    settings.set_do_not_disturb(True)

    assert mixer.calls == ["mute"]
    assert controller.muted

    settings.set_do_not_disturb(False)

    assert mixer.calls == ["mute", "unmute"]
    assert not controller.muted


def test_leaves_audio_alone_without_mute_sounds(settings: SettingsManager, mixer):
    DoNotDisturbController(settings)

    settings.set_do_not_disturb(True)
    settings.set_do_not_disturb(False)

    assert mixer.calls == []


def test_only_unmutes_what_it_muted(settings: SettingsManager, mixer):
    DoNotDisturbController(settings)

    settings.set_do_not_disturb(True)
    # enabled after do not disturb was turned on
    settings.set_should_mute_sound(True)
    settings.set_do_not_disturb(False)

    assert mixer.calls == []


def test_ignores_redundant_notifications(settings: SettingsManager, notification_store, mixer):
    settings.set_should_mute_sound(True)
    DoNotDisturbController(settings)

    settings.set_do_not_disturb(True)
    settings.set_do_not_disturb(True)
    notification_store.emit("show-banners")

    assert mixer.calls == ["mute"]


def test_does_not_act_on_startup_state(settings: SettingsManager, mixer):
    settings.set_should_mute_sound(True)
    settings.set_do_not_disturb(True)

    DoNotDisturbController(settings)

    assert mixer.calls == []


def test_dispose_stops_reacting(settings: SettingsManager, notification_store, mixer):
    settings.set_should_mute_sound(True)
    controller = DoNotDisturbController(settings)

    controller.dispose()
    settings.set_do_not_disturb(True)

    assert mixer.calls == []
    assert notification_store.callbacks["show-banners"] == []
