from .bind import bind_flag
from .gesture import set_on_click
from .signal import weak_signal

__all__ = [bind_flag, set_on_click, weak_signal]
