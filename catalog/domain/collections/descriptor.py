"""Collection descriptors and registry entries.

CollectionDescriptor is the public value describing one collection.
CollectionDetails is the registry's entry: the descriptor plus what is needed
to build the collection's resource, and the children wired in while the tree
is built.
"""

from collections.abc import Callable
from dataclasses import dataclass, field, replace
from typing import Any

# Explicit builder declared on a marker: (repository handle or None, authorizer) -> resource
type ResourceFactory = Callable[[Any, Any], Any]

# Explicit post-construction hook declared on a marker
type ResourceInitializer = Callable[[Any], None]

_DEFAULT_PORTS = {"http": 80, "https": 443}


@dataclass(frozen=True, slots=True, kw_only=True)
class CollectionDescriptor:
    """Name, documentation and address of one collection.

    Attributes:
        name: Collection name (e.g., "tables").
        documentation: Human-readable description.
        href: Collection address. Canonical descriptors hold the path
            (e.g., "/v1/tables"); response copies hold an absolute URL.
    """

    name: str
    documentation: str
    href: str

    def with_href(self, href: str) -> "CollectionDescriptor":
        """Return a copy with a different address."""
        return replace(self, href=href)


@dataclass(frozen=True, slots=True, kw_only=True)
class RequestContext:
    """Origin of the inbound request, used to render absolute hrefs.

    Attributes:
        scheme: "http" or "https".
        host: Host name as seen by the client.
        port: Explicit port, or None when the scheme default applies.
        root_path: Path every collection is mounted under (e.g., "/api").
    """

    scheme: str
    host: str
    port: int | None = None
    root_path: str = ""

    def absolute(self, path: str) -> str:
        """Render ``path`` as an absolute URL for this request.

        Examples:
            >>> RequestContext(scheme="https", host="api.example.com").absolute("/v1")
            'https://api.example.com/v1'
            >>> RequestContext(scheme="http", host="localhost", port=8585).absolute("/v1")
            'http://localhost:8585/v1'
            >>> RequestContext(scheme="http", host="::1", port=8585).absolute("/v1")
            'http://[::1]:8585/v1'
        """
        # IPv6 literals are bracketed in URLs
        host = f"[{self.host}]" if ":" in self.host else self.host
        if self.port is None or self.port == _DEFAULT_PORTS.get(self.scheme):
            netloc = host
        else:
            netloc = f"{host}:{self.port}"
        return f"{self.scheme}://{netloc}{self.root_path}{path}"


@dataclass(kw_only=True, eq=False)
class CollectionDetails:
    """Registry entry for one collection.

    Children are appended while the registry builds its tree. After
    freeze() the entry is read-only and may be shared across threads.

    Attributes:
        descriptor: Canonical descriptor (href is the collection path).
        resource_type: Dotted name of the resource class.
        repository_type: Dotted name of the repository class, if the
            resource needs one.
        factory: Explicit resource builder, overrides the default
            constructor shapes.
        initializer: Explicit post-construction hook, overrides the
            initialize() method probe.
    """

    descriptor: CollectionDescriptor
    resource_type: str
    repository_type: str | None = None
    factory: ResourceFactory | None = None
    initializer: ResourceInitializer | None = None
    _children: list[CollectionDescriptor] = field(
        default_factory=list, init=False, repr=False
    )
    _frozen: bool = field(default=False, init=False, repr=False)

    @property
    def name(self) -> str:
        return self.descriptor.name

    @property
    def href(self) -> str:
        return self.descriptor.href

    @property
    def children(self) -> tuple[CollectionDescriptor, ...]:
        """Child descriptors in insertion order."""
        return tuple(self._children)

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def add_child(self, child: CollectionDescriptor) -> None:
        """Append a child descriptor.

        Raises:
            RuntimeError: If the entry has been frozen.
        """
        if self._frozen:
            raise RuntimeError(
                f"Collection {self.href} is frozen, cannot add child {child.href}"
            )
        self._children.append(child)

    def freeze(self) -> None:
        """End the build phase for this entry."""
        self._frozen = True
