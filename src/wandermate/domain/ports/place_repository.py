"""Place repository port."""

from typing import Protocol

from wandermate.domain.models.place import Place


class PlaceRepository(Protocol):
    """Port for the places-of-interest catalog."""

    async def get_all_places(self) -> list[Place]:
        """Return every place the catalog knows about.

        Raises:
            RemoteQueryFailed: If the catalog cannot be reached.
        """
        ...
