import os

from ignis.app import IgnisApp
from ignis.css_manager import CssInfoPath, CssManager
from ignis.utils import get_n_monitors

from donotdisturb.commands import register_commands
from donotdisturb.constants import SCHEMA_DIR
from donotdisturb.preferences import Preferences
from donotdisturb.services import DoNotDisturbController, ensure_compiled_schemas
from donotdisturb.services.gsettings import load_settings_manager
from donotdisturb.topbar import Topbar

app = IgnisApp.get_initialized()
css_manager = CssManager.get_default()

config_dir = os.path.dirname(os.path.abspath(__file__))
css_manager.apply_css(CssInfoPath(name="main", path=os.path.join(config_dir, "style.css")))

ensure_compiled_schemas(SCHEMA_DIR)
settings = load_settings_manager(SCHEMA_DIR)
controller = DoNotDisturbController(settings)

register_commands(settings)
Preferences(settings)

for idx in range(get_n_monitors()):
    Topbar(settings, idx)
