# radios/rigctl/sender.py
import os
import shutil
import subprocess
import time
from typing import List, Optional

from loghandler import get_logger
from radio_interface import BaseRadioSender, ProcessError, SendResult

logger = None

DEFAULT_MODEL = 1  # Hamlib Dummy


class RigctlSender(BaseRadioSender):
    """
    Sets the frequency by running Hamlib's `rigctl` as a child process.

    Design:
      - One process per call: `rigctl -m <model> F <frequency>`.
      - stdout and stderr are captured together; that text is the response on
        success and the diagnostic on failure.
      - Spawn failures (binary missing, not executable) and non-zero exits
        become ProcessError results, never exceptions.
      - The model comes from the call (per-profile) or falls back to the
        default configured for the sender.
    """

    name = "rigctl"

    def __init__(self, model: int = DEFAULT_MODEL, rigctl_path: Optional[str] = None):
        global logger
        if logger is None:
            logger = get_logger()

        self.model = int(model)
        self.rigctl_path = self._resolve_binary(rigctl_path)

    @staticmethod
    def _resolve_binary(configured: Optional[str]) -> str:
        """Configured path first, then PATH lookup, then the bare name."""
        if configured:
            if not os.path.isfile(configured):
                logger.warning(
                    f"The configured rigctl path is not a file: {configured}\n"
                    "💡 Please check that this path points to rigctl (rigctl.exe on Windows)."
                )
            return configured
        return shutil.which("rigctl") or "rigctl"

    def build_command(self, frequency: str, model: Optional[int] = None) -> List[str]:
        return [self.rigctl_path, "-m", str(self.model if model is None else int(model)), "F", frequency]

    def send(self, frequency: str, model: Optional[int] = None) -> SendResult:
        cmd = self.build_command(frequency, model)
        command_text = " ".join(cmd[1:])
        logger.debug(f"[RIGCTL] Running: {' '.join(cmd)}")
        t0 = time.time()

        try:
            result = subprocess.run(
                cmd,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                errors="replace",
            )
        except OSError as e:
            err = ProcessError(f"Failed to execute '{cmd[0]}': {e}")
            logger.error(
                f"[RIGCTL] {err}\n"
                "💡 Please ensure Hamlib is installed and rigctl is accessible, "
                "or set rigctl.path in settings.yml."
            )
            return SendResult.failure(self.name, command_text, err)

        ms = int((time.time() - t0) * 1000)
        output = result.stdout or ""

        if result.returncode != 0:
            err = ProcessError(
                f"rigctl failed with return code {result.returncode}: {output.strip()}",
                returncode=result.returncode,
                output=output,
            )
            logger.error(f"[RIGCTL] {err}")
            return SendResult.failure(self.name, command_text, err, response=output, elapsed_ms=ms)

        logger.info(f"[RIGCTL] rigctl output ({ms} ms): {output.strip()}")
        return SendResult.success(self.name, command_text, output, elapsed_ms=ms)
