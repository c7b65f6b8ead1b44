"""Fill-in template object."""

import logging
from typing import Any, Dict, Optional, TextIO

from fillin.config import FillInConfig, get_default_config
from fillin.engine.interpreter import InterpretationEngine, OutputMode
from fillin.exceptions import TemplateNotFoundError, TemplateReadError
from fillin.loader import TemplateLoader


logger = logging.getLogger(__name__)


class Template:
    """
    A fill-in template: some text plus the configuration used to interpret it.

    Interpreting never changes the stored text. The property bag is for the
    caller's convenience; the engine ignores it.

    Example:
        >>> config = FillInConfig()
        >>> config.variables['you'] = 'Sam'
        >>> Template('hey, [[$you]]!', config).interpret()
        'hey, Sam!'
    """

    def __init__(self, text: Optional[str] = None, config: Optional[FillInConfig] = None):
        self.text = text
        self.config = config if config is not None else get_default_config()
        self.properties: Dict[str, Any] = {}

    def get_text(self) -> Optional[str]:
        return self.text

    def set_text(self, text: str) -> None:
        self.text = text

    def get_file(self, name: str) -> bool:
        """
        Replace the template text with a file's contents.

        Args:
            name: Absolute path, name on the config's template path, or `null`

        Returns:
            True on success. False if the file is missing (text unchanged) or
            unreadable (text emptied); both are logged as warnings.
        """
        loader = TemplateLoader(self.config.template_path)
        try:
            self.text = loader.load(name)
        except TemplateNotFoundError as e:
            logger.warning(str(e))
            return False
        except TemplateReadError as e:
            logger.warning(str(e))
            self.text = ''
            return False
        return True

    def interpret(self) -> str:
        """Return the interpreted template."""
        return InterpretationEngine(self.config).run(self.text or '', OutputMode.COLLECT)

    def interpret_and_print(self, stream: Optional[TextIO] = None) -> None:
        """Interpret the template, streaming output to `stream` (stdout by default)."""
        InterpretationEngine(self.config).run(self.text or '', OutputMode.STREAM, stream=stream)

    def get_property(self, name: str) -> Any:
        return self.properties.get(name)

    def set_property(self, name: str, value: Any) -> None:
        self.properties[name] = value
