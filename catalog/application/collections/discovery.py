"""Discovery of @collection resource classes.

Every module under the configured packages is imported, and each class it
defines that carries a collection marker becomes one CollectionDetails.
Failures are isolated: a module that cannot be imported, or a class whose
marker is malformed, is logged and skipped while discovery continues.
"""

import importlib
import inspect
import pkgutil
from collections.abc import Iterator, Sequence
from types import ModuleType

from catalog.application.collections.type_resolution import type_name
from catalog.domain.collections import (
    CollectionDescriptor,
    CollectionDetails,
    get_collection_marker,
    validate_collection_path,
)
from catalog.domain.errors import DiscoveryError
from catalog.domain.protocols.logger_protocol import LoggerProtocol


def discover_collections(
    packages: Sequence[str],
    logger: LoggerProtocol,
) -> list[CollectionDetails]:
    """Find every marked resource class under ``packages``.

    Args:
        packages: Dotted package (or module) names to scan recursively.
        logger: Structured logger.

    Returns:
        One CollectionDetails per marked class, in no particular order.
    """
    collections: list[CollectionDetails] = []
    for module in _iter_modules(packages, logger):
        for resource_class in _marked_classes(module):
            try:
                details = collection_details_for(resource_class)
            except DiscoveryError as e:
                logger.error(
                    "collection_discovery_failed",
                    error=e,
                    resource_type=e.resource_type,
                )
                continue
            collections.append(details)
            logger.debug(
                "collection_discovered",
                collection=details.name,
                href=details.href,
                resource_type=details.resource_type,
            )

    logger.info("collections_discovered", count=len(collections))
    return collections


def collection_details_for(resource_class: type) -> CollectionDetails:
    """Read the collection marker on ``resource_class``.

    Args:
        resource_class: Class decorated with @collection.

    Returns:
        Registry entry for the class, with no children yet.

    Raises:
        DiscoveryError: If the marker is missing, its name is empty or not a
            string, its path is not a valid collection address, or its
            repository is neither a class nor a dotted name.
    """
    resource_type = type_name(resource_class)
    marker = get_collection_marker(resource_class)
    if marker is None:
        raise DiscoveryError(resource_type, "missing @collection marker")
    if not isinstance(marker.name, str):
        raise DiscoveryError(
            resource_type,
            f"collection name must be a string, got {type(marker.name).__name__}",
        )
    if not marker.name:
        raise DiscoveryError(resource_type, "missing collection name")

    try:
        path = validate_collection_path(marker.path)
    except ValueError as e:
        raise DiscoveryError(resource_type, str(e)) from e

    documentation = marker.description
    if documentation is None:
        documentation = _summary_line(resource_class)

    repository_type: str | None
    if marker.repository is None or isinstance(marker.repository, str):
        repository_type = marker.repository or None
    elif isinstance(marker.repository, type):
        repository_type = type_name(marker.repository)
    else:
        raise DiscoveryError(
            resource_type,
            f"repository must be a class or dotted name, got {marker.repository!r}",
        )

    return CollectionDetails(
        descriptor=CollectionDescriptor(
            name=marker.name,
            documentation=documentation,
            href=path,
        ),
        resource_type=resource_type,
        repository_type=repository_type,
        factory=marker.factory,
        initializer=marker.initializer,
    )


def _iter_modules(packages: Sequence[str], logger: LoggerProtocol) -> Iterator[ModuleType]:
    """Import and yield every module under ``packages`` once."""
    seen: set[str] = set()

    def on_walk_error(name: str) -> None:
        logger.debug("collection_package_walk_skipped", module=name)

    for package_name in packages:
        package = _import(package_name, logger)
        if package is None:
            continue
        if package.__name__ not in seen:
            seen.add(package.__name__)
            yield package

        search_path = getattr(package, "__path__", None)
        if search_path is None:
            continue

        for module_info in pkgutil.walk_packages(
            search_path,
            prefix=f"{package.__name__}.",
            onerror=on_walk_error,
        ):
            if module_info.name in seen:
                continue
            seen.add(module_info.name)
            module = _import(module_info.name, logger)
            if module is not None:
                yield module


def _import(module_name: str, logger: LoggerProtocol) -> ModuleType | None:
    try:
        return importlib.import_module(module_name)
    except Exception as e:
        logger.error("collection_module_import_failed", error=e, module=module_name)
        return None


def _marked_classes(module: ModuleType) -> list[type]:
    """Classes defined in ``module`` (not imported into it) carrying a marker."""
    return [
        member
        for _, member in inspect.getmembers(module, inspect.isclass)
        if member.__module__ == module.__name__
        and get_collection_marker(member) is not None
    ]


def _summary_line(resource_class: type) -> str:
    # __doc__ is looked up on the class itself; docstrings are not inherited here
    doc = resource_class.__dict__.get("__doc__")
    if not doc:
        return ""
    return inspect.cleandoc(doc).splitlines()[0].strip()
