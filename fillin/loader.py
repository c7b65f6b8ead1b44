"""Template lookup on a search path."""

import logging
from pathlib import Path
from typing import List, Optional, Sequence

from fillin.exceptions import TemplateNotFoundError, TemplateReadError


logger = logging.getLogger(__name__)


class TemplateLoader:
    """
    Finds and reads template files.

    Absolute names are used as given; relative names are looked up in each
    search directory in order and the first regular file wins. The reserved
    name `null` is an empty template.
    """

    NULL_TEMPLATE = 'null'

    def __init__(self, search_path: Optional[Sequence[str]] = None):
        """
        Initialize loader.

        Args:
            search_path: Directories to search (current directory if omitted)
        """
        self.search_path: List[str] = list(search_path) if search_path is not None else ['.']

    def find(self, name: str) -> Optional[Path]:
        """
        Locate a template file.

        Args:
            name: Absolute path or name relative to a search directory

        Returns:
            Path of the template, or None if not found
        """
        candidate = Path(name)
        if candidate.is_absolute():
            return candidate if candidate.is_file() else None

        for directory in self.search_path:
            path = Path(directory) / name
            if path.is_file():
                return path
        return None

    def load(self, name: str) -> str:
        """
        Read a template's text.

        Args:
            name: Template name (see find), or `null`

        Returns:
            Template text

        Raises:
            TemplateNotFoundError: If no file matches
            TemplateReadError: If the file cannot be read
        """
        if name == self.NULL_TEMPLATE:
            return ''

        path = self.find(name)
        if path is None:
            raise TemplateNotFoundError(name, self.search_path)

        try:
            with open(path, 'r', encoding='utf-8') as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise TemplateReadError(str(path), str(e))

        logger.debug(f"Loaded template {path}")
        return text
