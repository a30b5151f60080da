"""Exceptions raised while reading a Scrapbox export."""

from typing import Optional

from src.esa_client.errors import MigrationError


class ExportReadError(MigrationError):
    """Raised when the export file cannot be read or is not a valid export.

    This is always fatal: no page is published once it has been raised.
    """

    def __init__(self, file_path: str, reason: str, field: Optional[str] = None):
        message = f"Cannot read Scrapbox export {file_path}"
        if field:
            message += f" (field '{field}')"
        message += f": {reason}"
        super().__init__(message)
        self.file_path = file_path
        self.reason = reason
        self.field = field
