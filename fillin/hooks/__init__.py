"""Hook registry and built-in hooks."""

from .builtin import VariableLookupHook, FunctionCallHook, split_args
from .registry import HookRegistry

__all__ = ['HookRegistry', 'VariableLookupHook', 'FunctionCallHook', 'split_args']
