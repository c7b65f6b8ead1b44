"""
Hook registry mapping tag characters to resolver capabilities.

Two tags have built-in hooks (`$` and `&`); callers may add hooks for any
other non-word character or override the built-ins. Registration is a plain
overwrite, last writer wins.
"""

import logging
import re
from typing import Any, Callable, Dict, List, Optional

from .builtin import VariableLookupHook, FunctionCallHook


logger = logging.getLogger(__name__)

Hook = Callable[[str], Any]

TAG_PATTERN = re.compile(r'[^\w\s]')


class HookRegistry:
    """
    Registry for template hooks.

    Owns the variable store consulted by the `$` hook and the function table
    consulted by the `&` hook.
    """

    def __init__(
        self,
        variables: Optional[Dict[str, Any]] = None,
        functions: Optional[Dict[str, Callable[..., Any]]] = None
    ):
        """
        Initialize registry with the built-in hooks.

        Args:
            variables: Variable store for the `$` hook
            functions: Exported function table for the `&` hook
        """
        self.variables: Dict[str, Any] = variables if variables is not None else {}
        self.functions: Dict[str, Callable[..., Any]] = functions if functions is not None else {}
        self._hooks: Dict[str, Hook] = {}
        self._builtin_hooks = self._load_builtin_hooks()

    def _load_builtin_hooks(self) -> Dict[str, Hook]:
        """
        Build the built-in hooks bound to this registry's store and function table.

        Returns:
            Dictionary of built-in hooks keyed by tag
        """
        return {
            '$': VariableLookupHook(self.variables),
            '&': FunctionCallHook(self.functions),
        }

    def register(self, tag: str, hook: Hook) -> None:
        """
        Register a hook for a tag character.

        Args:
            tag: Single non-word, non-whitespace character
            hook: Callable taking the payload string and returning replacement text

        Raises:
            ValueError: If the tag or hook is invalid
        """
        if not isinstance(tag, str) or len(tag) != 1 or not TAG_PATTERN.fullmatch(tag):
            raise ValueError(f"Hook tag must be a single non-word, non-whitespace character, got {tag!r}")
        if not callable(hook):
            raise ValueError(f"Hook for tag '{tag}' must be callable")

        if self.exists(tag):
            logger.debug(f"Overriding hook for tag '{tag}'")
        self._hooks[tag] = hook
        logger.debug(f"Registered hook for tag '{tag}'")

    def unregister(self, tag: str) -> None:
        """Remove a hook, including a built-in one. Unknown tags are ignored."""
        self._hooks.pop(tag, None)
        self._builtin_hooks.pop(tag, None)

    def get(self, tag: str) -> Optional[Hook]:
        """
        Get the hook for a tag.

        Args:
            tag: Tag character

        Returns:
            Hook or None if not registered
        """
        # Caller-registered hooks shadow built-ins
        if tag in self._hooks:
            return self._hooks[tag]
        return self._builtin_hooks.get(tag)

    def exists(self, tag: str) -> bool:
        """Check if a hook is registered for a tag."""
        return tag in self._hooks or tag in self._builtin_hooks

    def list_tags(self) -> List[str]:
        """List all tags with a registered hook, sorted."""
        return sorted(set(self._hooks) | set(self._builtin_hooks))

    def clone(self) -> 'HookRegistry':
        """
        Create an independent copy.

        The store and function table are copied (shallow), so changes to the
        clone do not leak into this registry.
        """
        other = HookRegistry(
            variables=dict(self.variables),
            functions=dict(self.functions)
        )
        other._hooks = dict(self._hooks)
        # Built-ins must stay bound to the clone's own store; keep removals
        other._builtin_hooks = {
            tag: hook for tag, hook in other._builtin_hooks.items()
            if tag in self._builtin_hooks
        }
        return other

