"""
Errors raised while finding and removing duplicate files
"""

from pathlib import Path
from typing import Optional, Union


class DupError(Exception):
    """Base error, tied to the operation that failed and the path it failed on"""

    def __init__(
            self,
            path: Optional[Union[str, Path]],
            operation: str,
            reason: Optional[str] = None
    ) -> None:
        self.path = Path(path) if path is not None else None
        self.operation = operation
        self.reason = reason
        message = f"Failed to {operation}"
        if self.path is not None:
            message += f" {self.path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class ScanError(DupError):
    pass


class CompareError(DupError):
    pass


class RemoveError(DupError):
    pass


class PairCountError(DupError):
    pass
