"""Unit tests for the @collection marker."""

import pytest

from catalog.domain.collections import CollectionMarker, collection, get_collection_marker


def _factory(handle, authorizer):
    return object()


@pytest.mark.unit
class TestCollectionDecorator:
    """Test @collection and get_collection_marker()."""

    def test_decorator_returns_same_class(self):
        class Resource:
            pass

        assert collection(name="things", path="/v1/things")(Resource) is Resource

    def test_marker_records_all_arguments(self):
        @collection(
            name="things",
            path="/v1/things",
            repository="pkg.ThingRepository",
            description="Things",
            factory=_factory,
        )
        class Resource:
            pass

        marker = get_collection_marker(Resource)

        assert marker == CollectionMarker(
            name="things",
            path="/v1/things",
            description="Things",
            repository="pkg.ThingRepository",
            factory=_factory,
            initializer=None,
        )

    def test_malformed_marker_does_not_fail_at_decoration(self):
        """Test validation is deferred to discovery."""

        @collection(name="things", path="not-absolute")
        class Resource:
            pass

        assert get_collection_marker(Resource).path == "not-absolute"

    def test_unmarked_class_has_no_marker(self):
        class Resource:
            pass

        assert get_collection_marker(Resource) is None

    def test_marker_is_not_inherited(self):
        """Test subclasses of a marked class are not collections themselves."""

        @collection(name="things", path="/v1/things")
        class Resource:
            pass

        class SubResource(Resource):
            pass

        assert get_collection_marker(Resource) is not None
        assert get_collection_marker(SubResource) is None
