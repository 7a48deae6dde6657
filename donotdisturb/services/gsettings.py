import os
from typing import Callable

from gi.repository import Gio, GLib
from loguru import logger

from ..constants import SCHEMA_DIR, SchemaId
from ..exceptions import SchemaNotFoundError
from .mixer import AmixerCommand
from .schemas import COMPILED_SCHEMAS
from .settings import SettingsManager
from .store import BooleanStore, Subscription


class GSettingsStore(BooleanStore):
    """
    A ``BooleanStore`` over ``Gio.Settings``, used for both the extension schema
    and the host's notification and sound schemas.
    """

    def __init__(self, settings: Gio.Settings):
        self._settings = settings

    @classmethod
    def new(cls, schema_id: str, schema_dir: str | None = None, backend: Gio.SettingsBackend | None = None):
        schema = lookup_schema(schema_id, schema_dir)
        return cls(Gio.Settings.new_full(schema, backend, None))

    @property
    def settings(self) -> Gio.Settings:
        return self._settings

    def get(self, key: str) -> bool:
        return self._settings.get_boolean(key)

    def set(self, key: str, value: bool):
        logger.debug(f"{self._settings.props.schema_id}: {key} = {value}")
        self._settings.set_boolean(key, value)

    def subscribe(self, key: str, callback: Callable[[], object]) -> Subscription:
        settings = self._settings
        spec = settings.connect(f"changed::{key}", lambda *_: callback())
        # Gio.Settings only emits ``changed`` for keys read after connecting.
        settings.get_boolean(key)
        return Subscription(key, lambda: settings.disconnect(spec))


def lookup_schema(schema_id: str, schema_dir: str | None = None) -> Gio.SettingsSchema:
    """
    Looks ``schema_id`` up in ``schema_dir`` if it holds compiled schemas, then in the system-wide registry.

    Raises:
        SchemaNotFoundError: If neither location provides the schema.
    """
    default_source = Gio.SettingsSchemaSource.get_default()

    if schema_dir and os.path.exists(os.path.join(schema_dir, COMPILED_SCHEMAS)):
        try:
            source = Gio.SettingsSchemaSource.new_from_directory(schema_dir, default_source, False)
        except GLib.Error as e:
            logger.warning(f"failed to load compiled schemas in {schema_dir}: {e}")
        else:
            schema = source.lookup(schema_id, False)
            if schema:
                return schema

    if default_source:
        schema = default_source.lookup(schema_id, True)
        if schema:
            return schema

    raise SchemaNotFoundError(schema_id)


def load_settings_manager(
    schema_dir: str = SCHEMA_DIR,
    backend: Gio.SettingsBackend | None = None,
    mixer: AmixerCommand | None = None,
) -> SettingsManager:
    """
    Builds a ``SettingsManager`` over GSettings.

    Raises:
        SchemaNotFoundError: If the extension schema or a host schema is missing.
    """
    app_settings = GSettingsStore.new(SchemaId.extension.value, schema_dir, backend)
    notification_settings = GSettingsStore.new(SchemaId.notifications.value, backend=backend)
    sound_settings = GSettingsStore.new(SchemaId.sound.value, backend=backend)
    return SettingsManager(app_settings, notification_settings, sound_settings, mixer or AmixerCommand())
