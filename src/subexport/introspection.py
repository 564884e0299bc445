"""
Stack introspection for finding the namespace an import was requested from.
"""

from __future__ import annotations

import inspect
import sys
from types import ModuleType
from typing import Any


class CallerIntrospector:
    """Locates the caller of an exporter on the stack."""

    @staticmethod
    def caller_globals(depth: int = 1) -> dict[str, Any]:
        """
        Return the globals of the frame ``depth`` levels above the caller.

        Args:
            depth: 1 means the frame that called the function calling this one

        Raises:
            RuntimeError: If the stack is not deep enough or frames are unavailable
        """
        frame = inspect.currentframe()
        try:
            # One extra hop for this function's own frame.
            for _ in range(depth + 1):
                if frame is None:
                    break
                frame = frame.f_back
            if frame is None:
                raise RuntimeError("cannot determine the calling namespace")
            return frame.f_globals
        finally:
            del frame

    @staticmethod
    def caller_module(depth: int = 1) -> ModuleType:
        """Return the module object of the frame ``depth`` levels above the caller."""
        module_globals = CallerIntrospector.caller_globals(depth + 1)
        name = module_globals.get("__name__", "__main__")
        module = sys.modules.get(name)
        if module is None:
            raise RuntimeError(f"module {name} is not loaded")
        return module
