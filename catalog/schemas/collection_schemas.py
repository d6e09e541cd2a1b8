"""Collection listing schemas.

Wire shape:
    {"collections": [{"collection": {"name": ..., "documentation": ..., "href": ...}}]}
"""

from collections.abc import Iterable

from pydantic import BaseModel, Field

from catalog.domain.collections import CollectionDescriptor


class CollectionInfo(BaseModel):
    """Name, documentation and absolute address of one collection."""

    name: str = Field(..., description="Collection name", examples=["tables"])
    documentation: str = Field(..., description="What the collection holds")
    href: str = Field(
        ...,
        description="Absolute URL of the collection",
        examples=["https://catalog.example.com/api/v1/tables"],
    )


class CollectionDescriptorResponse(BaseModel):
    """One entry of a collection listing."""

    collection: CollectionInfo


class CollectionListResponse(BaseModel):
    """Child collections of a collection."""

    collections: list[CollectionDescriptorResponse] = Field(default_factory=list)

    @classmethod
    def from_descriptors(
        cls, descriptors: Iterable[CollectionDescriptor]
    ) -> "CollectionListResponse":
        return cls(
            collections=[
                CollectionDescriptorResponse(
                    collection=CollectionInfo(
                        name=d.name,
                        documentation=d.documentation,
                        href=d.href,
                    )
                )
                for d in descriptors
            ]
        )
