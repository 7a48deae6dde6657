from .controller import DoNotDisturbController
from .mixer import AmixerCommand, MixerAction
from .schemas import ensure_compiled_schemas
from .settings import SettingsManager
from .store import BooleanStore, Subscription, SubscriptionGroup, WeakMethodCallback

__all__ = [
    AmixerCommand,
    BooleanStore,
    DoNotDisturbController,
    MixerAction,
    SettingsManager,
    Subscription,
    SubscriptionGroup,
    WeakMethodCallback,
    ensure_compiled_schemas,
]
