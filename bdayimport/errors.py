"""
Error types for the birthday import run
"""

from typing import Optional


class FatalSetupError(Exception):
    """Error that aborts the whole import run"""

    stage = "setup"

    def __init__(self, message: str, stage: Optional[str] = None):
        super().__init__(message)
        self.message = message
        if stage is not None:
            self.stage = stage

    def __str__(self):
        return f"{self.stage}: {self.message}"


class MissingTokenError(FatalSetupError):
    """No access token was supplied"""

    stage = "setup"


class DirectoryError(FatalSetupError):
    """Contacts could not be fetched from the People API"""

    stage = "fetch"


class ProvisionError(FatalSetupError):
    """The target calendar could not be created"""

    stage = "provision"


class CalendarAPIError(Exception):
    """A Calendar API request was rejected or did not complete"""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status
