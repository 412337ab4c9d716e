"""Exceptions for ss-switch."""


class SwitchError(Exception):
    """Base exception for config switching errors."""

    pass


class PrivilegeError(SwitchError):
    """Process is not running with root privileges."""

    pass


class ConfigDirError(SwitchError):
    """Configuration directory is missing or unreadable."""

    pass


class LinkError(SwitchError):
    """Error reading, removing or creating the active config link."""

    pass


class PromptCancelled(SwitchError):
    """Interactive selection was cancelled or its input closed."""

    pass


class NoCandidatesError(SwitchError):
    """Nothing to choose from in the configuration directory."""

    pass


class CommandError(SwitchError):
    """External control command failed to launch or exited unsuccessfully.

    Args:
        command: Argument vector that was run
        returncode: Exit status, negative if killed by a signal, None if it never ran
    """

    def __init__(self, message: str, command: list[str], returncode: int | None = None):
        super().__init__(message)
        self.command = command
        self.returncode = returncode

    @property
    def exit_code(self) -> int:
        """Exit status to propagate, 1 when the command has none of its own."""
        if self.returncode is None or self.returncode <= 0:
            return 1
        return self.returncode
