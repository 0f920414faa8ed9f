"""App import resolution — resolves ``"module:attribute"`` strings to Nattramn apps."""

import importlib

from nattramn.app import Nattramn


def resolve_app(import_string: str) -> Nattramn:
    """Resolve an import string to a Nattramn instance.

    Accepts ``"module:attribute"`` format.  When the attribute portion
    is omitted, defaults to ``"app"`` (e.g. ``"site"`` resolves to
    ``site.app``).

    Factory functions are supported: a callable that is not already a
    Nattramn instance is called with no arguments.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the resolved object is not a ``Nattramn`` app.
    """
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "app"

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    if callable(obj) and not isinstance(obj, Nattramn):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"Factory function {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc

    if not isinstance(obj, Nattramn):
        msg = f"{import_string!r} resolved to {type(obj).__name__}, not a nattramn.Nattramn instance"
        raise TypeError(msg)

    return obj
