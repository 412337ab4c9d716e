"""ss-switch: pick the active Shadowsocks configuration.

Configuration files live side by side in a directory (typically
/etc/shadowsocks). The active one is selected by a symlink named
config.json. Switching stops the proxy through its control command
(ss-tproxy), repoints the symlink and starts the proxy again.

Public API:
    ConfigSwitcher: Discovers candidates and performs the switch
    SwitchPaths: Dataclass with the directory, link name and control command
    ConfigCandidate: A selectable configuration file
    SwitchState: Enum of switch phases
    Localizer: Message catalog lookup for user-facing text
    SwitchError and subclasses: Exception types

Example:
    ```python
    from ss_switch import ConfigSwitcher, Localizer, SwitchPaths

    switcher = ConfigSwitcher(SwitchPaths(), Localizer(["en-US"]))
    switcher.enter_config_dir()

    current = switcher.current_link()
    candidates = switcher.discover(current)
    switcher.switch(candidates[-1], current)
    ```
"""

from .exceptions import CommandError
from .exceptions import ConfigDirError
from .exceptions import LinkError
from .exceptions import NoCandidatesError
from .exceptions import PrivilegeError
from .exceptions import PromptCancelled
from .exceptions import SwitchError
from .lang import Localizer
from .manager import ConfigSwitcher
from .models import ConfigCandidate
from .models import SwitchPaths
from .models import SwitchState
from .utils import format_candidate

__version__ = "0.1.0"

__all__ = [
    "ConfigSwitcher",
    "SwitchPaths",
    "ConfigCandidate",
    "SwitchState",
    "Localizer",
    "format_candidate",
    "SwitchError",
    "PrivilegeError",
    "ConfigDirError",
    "LinkError",
    "PromptCancelled",
    "NoCandidatesError",
    "CommandError",
]
