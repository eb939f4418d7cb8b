"""Exception types raised by the installer."""


class ClaudeWslError(Exception):
    """Base class for errors reported to the user."""


class SettingsError(ClaudeWslError):
    """Claude settings.json has a shape we refuse to overwrite."""


class InstallError(ClaudeWslError):
    """An installation step failed and the run cannot continue.

    Attributes:
        step: Short description of the step that failed
        message: Underlying error message
    """

    def __init__(self, step: str, message: str) -> None:
        super().__init__(message)
        self.step = step
        self.message = message
