"""
Audit API Routes

Handles audit log retrieval endpoints.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel

from src.api.error import raise_for_error
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.audit import GetAuditLogsUseCase
from src.depends import get_request_context, get_unit_of_work
from src.domain.entities import EntityType

router = APIRouter(prefix="/audit", tags=["Audit"])


class AuditLogResponse(BaseModel):
    """Single audit log row in response"""

    id: str
    entity_id: str
    entity_type: str
    action: str
    user_email: Optional[str]
    changes: Dict[str, Any]
    metadata: Dict[str, Any]
    ip_address: Optional[str]
    user_agent: Optional[str]
    timestamp: str


class AuditLogsResponse(BaseModel):
    """GET /audit/logs response payload"""

    logs: List[AuditLogResponse]
    next_cursor: Optional[str]


@router.get(
    "/logs",
    status_code=status.HTTP_200_OK,
    response_model=AuditLogsResponse,
)
async def get_audit_logs(
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    entity_type: Optional[EntityType] = Query(None, description="Only logs about this entity kind"),
    entity_id: Optional[str] = Query(None, description="Only logs about this entity"),
    limit: int = Query(50, ge=1, le=100, description="Maximum number of logs to return"),
    cursor: Optional[str] = Query(None, description="Pagination cursor"),
):
    """
    Get Audit Logs

    Query Parameters:
        - entity_type: Filter by entity kind (optional)
        - entity_id: Filter by entity id (optional)
        - limit: Maximum number of logs to return (1-100, default 50)
        - cursor: Pagination cursor for fetching next page

    Returns:
        - logs: List of audit logs ordered by newest first
        - next_cursor: Cursor for next page (null if no more logs)

    Raises:
        - 401 Unauthorized: Missing or invalid token
        - 500 Internal Server Error: Server error
    """
    # Execute use case
    use_case = GetAuditLogsUseCase(uow)
    result = await use_case.execute(
        ctx,
        entity_type=entity_type,
        entity_id=entity_id,
        limit=limit,
        cursor=cursor,
    )

    # Handle errors
    if result.is_err():
        raise_for_error(result.error)

    # Return successful response
    return result.value
