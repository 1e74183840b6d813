from dataclasses import dataclass
from typing import Optional
from uuid import UUID


@dataclass(frozen=True)
class RequestContext:
    """
    Explicit per-request actor and client information.

    Built once at the HTTP boundary and handed to every use case, so nothing
    below the API layer looks up ambient session or header state.
    """

    actor_id: Optional[UUID]
    ip_address: str = "unknown"
    user_agent: str = "unknown"

    @property
    def is_authenticated(self) -> bool:
        return self.actor_id is not None
