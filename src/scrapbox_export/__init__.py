"""Reading of Scrapbox project exports."""

from .errors import ExportReadError
from .loader import ExportLoader

__all__ = ['ExportLoader', 'ExportReadError']
