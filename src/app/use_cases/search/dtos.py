from typing import List
from uuid import UUID

from pydantic import BaseModel


class SearchHit(BaseModel):
    id: UUID
    title: str
    subtitle: str
    href: str


class SearchResponse(BaseModel):
    properties: List[SearchHit]
    units: List[SearchHit]
    tenants: List[SearchHit]
