"""Command-line entry point for ss-switch."""

import argparse
import logging
import sys
from pathlib import Path

from .exceptions import CommandError
from .exceptions import NoCandidatesError
from .exceptions import PrivilegeError
from .exceptions import SwitchError
from .lang import Localizer
from .lang import normalize_locale
from .lang import requested_languages
from .manager import ConfigSwitcher
from .models import SwitchPaths
from .prompt import select_config
from .utils import is_root

DEFAULTS = SwitchPaths()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ss-switch",
        description="Switch the active Shadowsocks configuration and restart ss-tproxy.",
    )
    parser.add_argument(
        "--config-dir",
        type=Path,
        default=DEFAULTS.config_dir,
        help=f"directory holding the configuration files (default: {DEFAULTS.config_dir})",
    )
    parser.add_argument(
        "--control-command",
        default=DEFAULTS.control_command,
        help=f"command run with stop/start around the switch (default: {DEFAULTS.control_command})",
    )
    parser.add_argument("--lang", help="locale for messages, e.g. zh-CN (default: from environment)")
    parser.add_argument("-v", "--verbose", action="store_true", help="log progress to stderr")
    return parser


def require_root(localizer: Localizer) -> None:
    """Raise PrivilegeError unless running as root."""
    if not is_root():
        raise PrivilegeError(localizer.get("request-root"))


def main(argv: list[str] | None = None) -> int:
    """Run the switcher and return the process exit status."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    tag = normalize_locale(args.lang) if args.lang else None
    localizer = Localizer([tag] if tag else requested_languages())
    # Some terminals render the isolation marks literally
    localizer.set_use_isolating(False)

    paths = SwitchPaths(config_dir=args.config_dir, control_command=args.control_command)
    switcher = ConfigSwitcher(paths, localizer)

    try:
        require_root(localizer)
        switcher.enter_config_dir()

        current = switcher.current_link()
        candidates = switcher.discover(current)
        if not candidates:
            raise NoCandidatesError(localizer.get("no-candidates", dir=paths.config_dir))

        selected = select_config(candidates, localizer)
        switcher.switch(selected, current)
    except CommandError as e:
        print(e, file=sys.stderr)
        return e.exit_code
    except SwitchError as e:
        print(e, file=sys.stderr)
        return 1

    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
