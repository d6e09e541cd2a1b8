from catalog.domain.collections import collection


@collection(
    name="columns",
    path="/v1/tables/columns",
    repository="tests.fixtures.resources.FakeRepository",
)
class SampleColumnsResource:
    """Sample columns."""

    def __init__(self, repository, authorizer) -> None:
        self.repository = repository
        self.authorizer = authorizer
        self.initialized = False

    def initialize(self) -> None:
        self.initialized = True
