"""App import resolution: ``"module:attribute"`` strings to BundledApp instances."""

import importlib

from bundled.app import BundledApp


def resolve_app(import_string: str) -> BundledApp:
    """Resolve an import string to a BundledApp instance.

    Accepts ``"module:attribute"``. When the attribute is omitted it
    defaults to ``"app"``. A callable that is not already an app is
    treated as a factory and called with no arguments.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the result is not a BundledApp.
    """
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "app"

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    if callable(obj) and not isinstance(obj, BundledApp):
        obj = obj()

    if not isinstance(obj, BundledApp):
        msg = f"{import_string!r} resolved to {type(obj).__name__}, not a BundledApp instance"
        raise TypeError(msg)

    return obj
