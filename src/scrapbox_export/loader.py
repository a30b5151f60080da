"""Scrapbox export loading and validation.

This module reads the JSON file produced by Scrapbox's "Export pages" feature
and turns it into ScrapboxExport / ScrapboxPage objects. Anything that does
not look like an export is rejected up front so that a bad file never results
in a partial migration.

Export file structure:
    {
      "name": "project",
      "displayName": "Project",
      "exported": 1546300800,
      "pages": [
        {"title": "Page", "created": 1546300000, "updated": 1546300500,
         "lines": ["Page", "first line", " indented line"]}
      ]
    }
"""

import json
import logging
from typing import Any, Dict, List

from src.models.scrapbox_page import ScrapboxExport, ScrapboxPage

from .errors import ExportReadError

logger = logging.getLogger(__name__)


class ExportLoader:
    """Loads a Scrapbox export file from disk."""

    @classmethod
    def load(cls, export_path: str) -> ScrapboxExport:
        """Read, decode and validate an export file.

        Args:
            export_path: Path to the exported JSON file

        Returns:
            ScrapboxExport with all pages in export order

        Raises:
            ExportReadError: If the file cannot be read or is not a valid export
        """
        try:
            with open(export_path, 'r', encoding='utf-8') as f:
                content = f.read()
        except FileNotFoundError:
            raise ExportReadError(export_path, 'File not found')
        except PermissionError:
            raise ExportReadError(export_path, 'Permission denied')
        except (OSError, UnicodeDecodeError) as e:
            raise ExportReadError(export_path, str(e))

        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise ExportReadError(export_path, f"Invalid JSON: {e}")

        if not isinstance(data, dict):
            raise ExportReadError(
                export_path,
                f"Export must be a JSON object, got {type(data).__name__}"
            )

        export = cls._parse_export(export_path, data)
        logger.info(
            f"Loaded {len(export.pages)} page(s) from project "
            f"'{export.name or export_path}'"
        )
        return export

    @classmethod
    def _parse_export(cls, export_path: str, data: Dict[str, Any]) -> ScrapboxExport:
        """Validate the decoded export and build model objects.

        Raises:
            ExportReadError: If a required field is missing or has the wrong type
        """
        pages_raw = data.get('pages')
        if not isinstance(pages_raw, list):
            raise ExportReadError(export_path, "Field must be a list", 'pages')

        pages = [
            cls._parse_page(export_path, i, page_dict)
            for i, page_dict in enumerate(pages_raw)
        ]

        return ScrapboxExport(
            name=str(data.get('name') or ''),
            display_name=str(data.get('displayName') or ''),
            exported=cls._parse_timestamp(export_path, data, 'exported', 'exported'),
            pages=pages,
        )

    @classmethod
    def _parse_page(cls, export_path: str, index: int, page_dict: Any) -> ScrapboxPage:
        field_prefix = f'pages[{index}]'
        if not isinstance(page_dict, dict):
            raise ExportReadError(export_path, "Page must be an object", field_prefix)

        title = page_dict.get('title')
        if not isinstance(title, str):
            raise ExportReadError(export_path, "Title must be a string", f'{field_prefix}.title')
        cls._check_encodable(export_path, title, f'{field_prefix}.title')

        lines_raw = page_dict.get('lines')
        if not isinstance(lines_raw, list):
            raise ExportReadError(export_path, "Lines must be a list", f'{field_prefix}.lines')

        lines: List[str] = []
        for line in lines_raw:
            if not isinstance(line, str):
                raise ExportReadError(
                    export_path,
                    f"Line must be a string, got {type(line).__name__}",
                    f'{field_prefix}.lines'
                )
            cls._check_encodable(export_path, line, f'{field_prefix}.lines')
            lines.append(line)

        return ScrapboxPage(
            title=title,
            created=cls._parse_timestamp(export_path, page_dict, 'created', f'{field_prefix}.created'),
            updated=cls._parse_timestamp(export_path, page_dict, 'updated', f'{field_prefix}.updated'),
            lines=lines,
        )

    @staticmethod
    def _check_encodable(export_path: str, value: str, field: str) -> None:
        # json.loads accepts lone surrogate escapes such as "\ud800"
        try:
            value.encode('utf-8')
        except UnicodeEncodeError as e:
            raise ExportReadError(
                export_path,
                f"Text is not valid Unicode: {e.reason} at position {e.start}",
                field
            ) from e

    @staticmethod
    def _parse_timestamp(export_path: str, data: Dict[str, Any], key: str, field: str) -> int:
        value = data.get(key, 0)
        if value is None:
            return 0
        # bool is an int subclass but never a valid timestamp
        if isinstance(value, bool) or not isinstance(value, int):
            raise ExportReadError(
                export_path,
                f"Timestamp must be an integer, got {type(value).__name__}",
                field
            )
        return value
