import logging
import subprocess

from .types import LaunchError, ShellOutput

logger = logging.getLogger(__name__)


def run_shell(command: str) -> ShellOutput:
    """Run `command` through the platform shell and capture its output."""
    try:
        result = subprocess.run(
            command,
            shell=True,
            capture_output=True,
        )
    except OSError as exc:
        logger.debug("Shell launch failed for %r: %s", command, exc)
        raise LaunchError(str(exc)) from exc

    return ShellOutput(result.stdout, result.stderr, result.returncode)
