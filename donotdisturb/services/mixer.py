import subprocess
from enum import Enum

from loguru import logger


class MixerAction(Enum):
    mute = "mute"
    unmute = "unmute"


class AmixerCommand:
    """
    Mutes or unmutes an ALSA mixer control through ``amixer``.

    Fire-and-forget: the exit status is logged but never reported to callers.
    """

    def __init__(self, control: str = "Master", device: str = "pulse"):
        self.control = control
        self.device = device

    def args(self, action: MixerAction) -> list[str]:
        return ["amixer", "-q", "-D", self.device, "sset", self.control, action.value]

    def run(self, action: MixerAction):
        args = self.args(action)
        logger.debug(f"running `{' '.join(args)}`")

        try:
            result = subprocess.run(args=args, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)
        except OSError as e:
            logger.warning(f"failed to {action.value} {self.control}: {e}")
            return

        if result.returncode != 0:
            logger.warning(f"amixer exits with return code {result.returncode}")

    def mute(self):
        self.run(MixerAction.mute)

    def unmute(self):
        self.run(MixerAction.unmute)
