"""Config switcher: discover candidates and swap the active link."""

import logging
import os
import subprocess
from collections.abc import Callable
from pathlib import Path

from .exceptions import CommandError
from .exceptions import ConfigDirError
from .exceptions import LinkError
from .lang import Localizer
from .models import ConfigCandidate
from .models import SwitchPaths
from .models import SwitchState
from .utils import order_candidates

logger = logging.getLogger(__name__)

Runner = Callable[[list[str], Path], int]


def run_command(argv: list[str], cwd: Path) -> int:
    """Run ``argv`` with inherited stdio and wait for it, with no timeout.

    Returns:
        The process return code (negative when killed by a signal)

    Raises:
        OSError: If the command cannot be launched
    """
    return subprocess.run(argv, cwd=cwd, check=False).returncode


class ConfigSwitcher:
    """Switches the active proxy configuration.

    The active configuration is a symlink (``paths.link_name``) inside
    ``paths.config_dir`` pointing at one of its sibling files. Switching stops
    the proxy through the control command, replaces the link and starts the
    proxy again. Nothing is rolled back if a step fails part way.

    Args:
        paths: Where configs live and which command controls the proxy
        localizer: Localization context for user-facing output
        runner: Runs a command and returns its exit status
        echo: Receives user-facing progress lines
    """

    def __init__(
        self,
        paths: SwitchPaths,
        localizer: Localizer,
        runner: Runner = run_command,
        echo: Callable[[str], None] = print,
    ):
        self.paths = paths
        self.localizer = localizer
        self.runner = runner
        self.echo = echo
        self.state = SwitchState.IDLE

    # ===== Discovery =====

    def enter_config_dir(self) -> None:
        """Check that the configuration directory is usable.

        Raises:
            ConfigDirError: If the directory is missing or inaccessible
        """
        config_dir = self.paths.config_dir
        if not config_dir.is_dir():
            raise ConfigDirError(self._dir_error("not a directory"))
        if not os.access(config_dir, os.R_OK | os.X_OK):
            raise ConfigDirError(self._dir_error("permission denied"))
        logger.info(f"Using config directory {config_dir}")

    def current_link(self) -> str | None:
        """Raw target of the active link, or None if there is no symlink.

        A regular file named like the link does not count as current.

        Raises:
            LinkError: If the symlink exists but cannot be read
        """
        link_path = self.paths.link_path
        if not link_path.is_symlink():
            return None

        try:
            return os.readlink(link_path)
        except OSError as e:
            raise LinkError(self._link_error(e, "link-read-error")) from e

    def discover(self, current: str | None) -> list[ConfigCandidate]:
        """List candidates, the current link target first.

        Unreadable entries are skipped.

        Args:
            current: Active link target as returned by current_link()

        Raises:
            ConfigDirError: If the directory cannot be listed
        """
        names = []

        try:
            with os.scandir(self.paths.config_dir) as entries:
                while True:
                    try:
                        entry = next(entries)
                    except StopIteration:
                        break
                    except OSError as e:
                        logger.debug(f"Skipping unreadable entry in {self.paths.config_dir}: {e}")
                        continue
                    if entry.name != self.paths.link_name:
                        names.append(entry.name)
        except OSError as e:
            raise ConfigDirError(self._dir_error(e.strerror or str(e))) from e

        candidates = order_candidates(sorted(names), current)
        logger.info(f"Found {len(candidates)} candidate(s), current: {current}")
        return candidates

    # ===== Switching =====

    def switch(self, candidate: ConfigCandidate, previous: str | None) -> None:
        """Stop the proxy, point the link at ``candidate`` and start it again.

        Args:
            candidate: Selected configuration
            previous: Link target before the switch, shown to the operator

        Raises:
            CommandError: If stop or start fails (link untouched if stop failed)
            LinkError: If the link cannot be replaced (proxy left stopped)
        """
        old = previous if previous is not None else self.localizer.get("no-config")
        self.echo(self.localizer.get("old-config", old=old))

        self._enter(SwitchState.STOPPING)
        self._control("stop")

        self._enter(SwitchState.SWITCHING)
        self._relink(candidate)

        self._enter(SwitchState.STARTING)
        self._control("start")

        self._enter(SwitchState.DONE)

    # ===== Private Helpers =====

    def _enter(self, state: SwitchState) -> None:
        logger.info(f"State {self.state.value} -> {state.value}")
        self.state = state

    def _control(self, action: str) -> None:
        """Run the control command with ``action`` in the config directory.

        Raises:
            CommandError: On launch failure or unsuccessful exit
        """
        argv = [self.paths.control_command, action]
        try:
            returncode = self.runner(argv, self.paths.config_dir)
        except OSError as e:
            self.state = SwitchState.FAILED
            message = self.localizer.get("command-launch-failed", command=" ".join(argv), reason=e.strerror or e)
            raise CommandError(message, argv) from e

        if returncode != 0:
            self.state = SwitchState.FAILED
            message = self.localizer.get("command-failed", command=" ".join(argv), code=returncode)
            raise CommandError(message, argv, returncode)

    def _relink(self, candidate: ConfigCandidate) -> None:
        """Replace the active link with one pointing at ``candidate``.

        Whatever sits at the link path (symlink, dangling symlink or regular
        file) is removed first.

        Raises:
            LinkError: If removal or creation fails
        """
        link_path = self.paths.link_path

        try:
            link_path.unlink(missing_ok=True)
        except OSError as e:
            self.state = SwitchState.FAILED
            raise LinkError(self._link_error(e)) from e

        self.echo(self.localizer.get("new-link", new=candidate.file, link=self.paths.link_name))

        try:
            link_path.symlink_to(candidate.file)
        except OSError as e:
            self.state = SwitchState.FAILED
            raise LinkError(self._link_error(e)) from e

        logger.info(f"Linked {link_path} -> {candidate.file}")

    def _dir_error(self, reason: str) -> str:
        return self.localizer.get("config-dir-error", dir=self.paths.config_dir, reason=reason)

    def _link_error(self, error: OSError, key: str = "link-error") -> str:
        return self.localizer.get(key, link=self.paths.link_path, reason=error.strerror or error)
