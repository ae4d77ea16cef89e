"""Local package manager adapters (rpm and dnf)."""

import logging
import subprocess
from typing import Sequence

from fedora_update_feedback.core import ExternalProcessError, PackageLister, ReleaseResolver

logger = logging.getLogger(__name__)


def run_command(command: Sequence[str]) -> str:
    """
    Run a helper command and return its decoded standard output.

    Raises:
        ExternalProcessError: If the command cannot be started, exits with a
            non-zero status, or prints output that is not valid UTF-8
    """
    logger.debug("Running %s", " ".join(command))

    try:
        result = subprocess.run(list(command), capture_output=True, check=False)
    except OSError as e:
        raise ExternalProcessError(f"Failed to run {command[0]}: {e}", command) from e

    if result.returncode != 0:
        stderr = result.stderr.decode("utf-8", errors="replace").strip()
        message = f"{command[0]} exited with status {result.returncode}"
        if stderr:
            message = f"{message}: {stderr}"
        raise ExternalProcessError(message, command)

    try:
        return result.stdout.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ExternalProcessError(f"{command[0]} printed non-UTF-8 output: {e}", command) from e


class RpmReleaseResolver(ReleaseResolver):
    """Ask rpm for the Fedora release of the running system."""

    COMMAND = ("rpm", "--eval", "%{fedora}")

    def get_release(self) -> str:
        number = run_command(self.COMMAND).strip()
        if not number.isdigit():
            raise ExternalProcessError(
                f"rpm did not report a Fedora release (got {number!r})", self.COMMAND
            )
        return f"F{number}"


class DnfPackageLister(PackageLister):
    """List source packages of everything installed, from the dnf cache."""

    COMMAND = ("dnf", "--quiet", "repoquery", "--cacheonly", "--installed", "--source")

    def list_installed(self) -> str:
        return run_command(self.COMMAND)
