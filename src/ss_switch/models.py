"""Data models for ss-switch."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class SwitchState(Enum):
    """Phases of a config switch.

    IDLE -> STOPPING -> SWITCHING -> STARTING -> DONE, with FAILED reachable
    from any active phase.
    """

    IDLE = "idle"
    STOPPING = "stopping"
    SWITCHING = "switching"
    STARTING = "starting"
    DONE = "done"
    FAILED = "failed"


@dataclass(frozen=True)
class ConfigCandidate:
    """A selectable configuration file.

    Attributes:
        file: Filename relative to the configuration directory
    """

    file: str


@dataclass(frozen=True)
class SwitchPaths:
    """Where configs live and which command controls the proxy.

    Applications inject these to point the switcher somewhere other than the
    system defaults (tests, alternate installs).

    Attributes:
        config_dir: Directory holding the sibling configuration files
        link_name: Name of the symlink selecting the active configuration
        control_command: Executable invoked with ``stop``/``start``
    """

    config_dir: Path = Path("/etc/shadowsocks")
    link_name: str = "config.json"
    control_command: str = "ss-tproxy"

    @property
    def link_path(self) -> Path:
        return self.config_dir / self.link_name
