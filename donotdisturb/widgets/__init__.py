from .adw_regular_window import AdwRegularWindow


__all__ = [AdwRegularWindow]
