import importlib

import typer

from wire_model.core.model import Model


def load_model(path: str) -> type[Model]:
    """Import ``package.module:ClassName`` and check that it is a wire model."""
    module_name, sep, class_name = path.partition(":")
    if not sep or not module_name or not class_name:
        raise typer.BadParameter(f"Expected MODULE:CLASS, got {path!r}")
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise typer.BadParameter(f"Cannot import module {module_name!r}: {exc}") from exc
    model_type = getattr(module, class_name, None)
    if not isinstance(model_type, type) or not issubclass(model_type, Model):
        raise typer.BadParameter(f"{path!r} is not a wire model class")
    return model_type
