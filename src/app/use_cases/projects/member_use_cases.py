"""
Project Member Use Cases
"""

import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services import paths
from src.app.services.mutation_envelope import ENVELOPE_ERRORS, AuditEntry, MutationEnvelope
from src.app.services.path_invalidator import PathInvalidator
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AuditAction, EntityType, ProjectMember

from .dtos import AddMemberCommand, MemberResponse, MemberRoleCommand
from .project_use_cases import PROJECT_NOT_FOUND

logger = logging.getLogger(__name__)

MEMBER_NOT_FOUND = Error("MEMBER_NOT_FOUND", "Project member not found")


class AddMemberUseCase:
    """
    Use case for adding a user to a project.

    Business Rules:
    - Project and user must exist
    - A user can be a member only once (INVALID_MEMBER)
    """

    def __init__(self, uow: UnitOfWork, invalidator: PathInvalidator):
        self.uow = uow
        self.envelope = MutationEnvelope(uow, invalidator)

    async def execute(
        self, ctx: RequestContext, project_id: UUID, command: AddMemberCommand
    ) -> Result[MemberResponse]:
        unauthorized = self.envelope.require_actor(ctx)
        if unauthorized:
            return Return.err(unauthorized)

        async with self.uow:
            try:
                project = await self.uow.projects.get_by_id(project_id)
                if project is None:
                    return Return.err(PROJECT_NOT_FOUND)

                user = await self.uow.users.get_by_id(command.user_id)
                if user is None:
                    return Return.err(Error("USER_NOT_FOUND", "User not found"))

                existing = await self.uow.projects.get_member(project_id, command.user_id)
                if existing is not None:
                    return Return.err(
                        Error(
                            "INVALID_MEMBER",
                            f"{user.full_name} is already a member of this project",
                        )
                    )

                member = await self.uow.projects.add_member(
                    ProjectMember(project_id=project_id, **command.model_dump())
                )
                await self.uow.commit()

                await self.envelope.finalize(
                    ctx,
                    AuditEntry(
                        entity_id=str(member.id),
                        entity_type=EntityType.project_member,
                        action=AuditAction.create,
                        changes=command.model_dump(mode="json"),
                        metadata={"project_id": str(project_id)},
                    ),
                    paths=[paths.project_detail(project_id)],
                )
            except ENVELOPE_ERRORS:
                logger.exception("Member addition failed")
                return Return.err(
                    Error("MEMBER_CREATE_ERROR", "Failed to add member. Please try again.")
                )

            return Return.ok(MemberResponse.model_validate(member))


class UpdateMemberRoleUseCase:
    def __init__(self, uow: UnitOfWork, invalidator: PathInvalidator):
        self.uow = uow
        self.envelope = MutationEnvelope(uow, invalidator)

    async def execute(
        self, ctx: RequestContext, project_id: UUID, user_id: UUID, command: MemberRoleCommand
    ) -> Result[MemberResponse]:
        unauthorized = self.envelope.require_actor(ctx)
        if unauthorized:
            return Return.err(unauthorized)

        async with self.uow:
            try:
                member = await self.uow.projects.get_member(project_id, user_id)
                if member is None:
                    return Return.err(MEMBER_NOT_FOUND)

                member.role = command.role
                member = await self.uow.projects.update_member(member)
                await self.uow.commit()

                await self.envelope.finalize(
                    ctx,
                    AuditEntry(
                        entity_id=str(member.id),
                        entity_type=EntityType.project_member,
                        action=AuditAction.update,
                        changes=command.model_dump(mode="json"),
                        metadata={"project_id": str(project_id)},
                    ),
                    paths=[paths.project_detail(project_id)],
                )
            except ENVELOPE_ERRORS:
                logger.exception("Member role update failed")
                return Return.err(
                    Error("MEMBER_UPDATE_ERROR", "Failed to update member role. Please try again.")
                )

            return Return.ok(MemberResponse.model_validate(member))


class RemoveMemberUseCase:
    def __init__(self, uow: UnitOfWork, invalidator: PathInvalidator):
        self.uow = uow
        self.envelope = MutationEnvelope(uow, invalidator)

    async def execute(
        self, ctx: RequestContext, project_id: UUID, user_id: UUID
    ) -> Result[MemberResponse]:
        unauthorized = self.envelope.require_actor(ctx)
        if unauthorized:
            return Return.err(unauthorized)

        async with self.uow:
            try:
                member = await self.uow.projects.get_member(project_id, user_id)
                if member is None:
                    return Return.err(MEMBER_NOT_FOUND)

                response = MemberResponse.model_validate(member)
                await self.uow.projects.remove_member(project_id, user_id)
                await self.uow.commit()

                await self.envelope.finalize(
                    ctx,
                    AuditEntry(
                        entity_id=str(response.id),
                        entity_type=EntityType.project_member,
                        action=AuditAction.delete,
                        metadata={"project_id": str(project_id), "user_id": str(user_id)},
                    ),
                    paths=[paths.project_detail(project_id)],
                )
            except ENVELOPE_ERRORS:
                logger.exception("Member removal failed")
                return Return.err(
                    Error("MEMBER_DELETE_ERROR", "Failed to remove member. Please try again.")
                )

            return Return.ok(response)
