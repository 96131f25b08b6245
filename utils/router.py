# utils/router.py
# Import a screen module and return its render callable.

from __future__ import annotations
import importlib
from typing import Callable


def resolve_renderer(module_name: str) -> Callable[[], None]:
    """
    Import `module_name` and return its renderer: `render` or `render_<module>`.
    Returns a stub that raises at call-time if neither exists, so the page list stays importable.
    """
    mod = importlib.import_module(module_name)
    base = module_name.rsplit(".", 1)[-1]
    for name in ("render", f"render_{base}"):
        fn = getattr(mod, name, None)
        if callable(fn):
            return fn

    def _missing_renderer() -> None:
        raise RuntimeError(f"Screen '{module_name}' has no render() or render_{base}() function.")
    return _missing_renderer
