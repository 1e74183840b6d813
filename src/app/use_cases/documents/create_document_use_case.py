"""
Create Document Use Case

Records metadata for an uploaded file. The file itself lives in external
storage; only its URL is kept.
"""

import logging
from typing import List

from libs.result import Error, Result, Return
from src.app.services import paths
from src.app.services.mutation_envelope import (
    ENVELOPE_ERRORS,
    AuditEntry,
    MutationEnvelope,
    NotificationDraft,
)
from src.app.services.path_invalidator import PathInvalidator
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AuditAction, Document, EntityType, NotificationType

from .dtos import DocumentCommand, DocumentResponse

logger = logging.getLogger(__name__)


def linked_paths(document: Document) -> List[str]:
    """Routes showing the entities the document is attached to"""
    linked = []
    if document.property_id:
        linked.append(paths.property_detail(document.property_id))
    if document.unit_id:
        linked.append(paths.space_detail(document.unit_id))
    if document.tenant_id:
        linked.append(paths.tenant_detail(document.tenant_id))
    return linked


class CreateDocumentUseCase:
    """
    Use case for creating a document record.

    Business Rules:
    - Optionally linked to a property, a unit and/or a tenant
    - Every linked route is invalidated
    - The uploader is notified
    """

    def __init__(self, uow: UnitOfWork, invalidator: PathInvalidator):
        self.uow = uow
        self.envelope = MutationEnvelope(uow, invalidator)

    async def execute(
        self, ctx: RequestContext, command: DocumentCommand
    ) -> Result[DocumentResponse]:
        unauthorized = self.envelope.require_actor(ctx)
        if unauthorized:
            return Return.err(unauthorized)

        async with self.uow:
            try:
                document = await self.uow.documents.create(
                    Document(**command.model_dump(), uploaded_by_id=ctx.actor_id)
                )
                await self.uow.commit()

                affected = linked_paths(document)
                draft = NotificationDraft(
                    title="Document Uploaded",
                    message=f'Document "{document.name}" has been uploaded successfully.',
                    type=NotificationType.document,
                    entity_id=str(document.id),
                    entity_type=EntityType.document,
                    action_url=affected[0] if affected else None,
                )
                await self.envelope.finalize(
                    ctx,
                    AuditEntry(
                        entity_id=str(document.id),
                        entity_type=EntityType.document,
                        action=AuditAction.create,
                        changes=command.model_dump(mode="json"),
                    ),
                    draft.fan_out([ctx.actor_id]),
                    affected,
                )
            except ENVELOPE_ERRORS:
                logger.exception("Document creation failed")
                return Return.err(
                    Error("DOCUMENT_CREATE_ERROR", "Failed to upload document. Please try again.")
                )

            return Return.ok(DocumentResponse.model_validate(document))
