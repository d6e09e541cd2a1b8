"""Dotted type names.

Registry entries refer to resource and repository classes by dotted name
(``package.module.QualName``) and resolve them only when a resource is built.
"""

import importlib


def type_name(cls: type) -> str:
    """Return the dotted name of ``cls``."""
    return f"{cls.__module__}.{cls.__qualname__}"


def resolve_type(dotted_name: str) -> type:
    """Import and return the class named by ``dotted_name``.

    The longest importable module prefix is imported, then the remaining
    segments are looked up as attributes, so nested classes resolve too.

    Args:
        dotted_name: Name produced by type_name().

    Returns:
        The class.

    Raises:
        ImportError: If no prefix of the name is an importable module, or a
            module imported along the way fails on a missing dependency.
        AttributeError: If the module has no such attribute.
        TypeError: If the name resolves to something other than a class.
    """
    parts = dotted_name.split(".")
    for index in range(len(parts) - 1, 0, -1):
        module_name = ".".join(parts[:index])
        try:
            target = importlib.import_module(module_name)
        except ModuleNotFoundError as e:
            # Only a missing prefix means "try a shorter one"
            if e.name is None or not (
                module_name == e.name or module_name.startswith(f"{e.name}.")
            ):
                raise
            continue

        for attribute in parts[index:]:
            target = getattr(target, attribute)
        if not isinstance(target, type):
            raise TypeError(f"{dotted_name} is not a class")
        return target

    raise ImportError(f"Cannot resolve type {dotted_name}")
