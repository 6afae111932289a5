from __future__ import annotations

from chain.errors import ChainError


class VenueError(ChainError):
    """Pool contract returned state the adapter cannot interpret."""
