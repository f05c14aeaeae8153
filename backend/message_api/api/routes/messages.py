"""Messages — CRUD endpoints for organization-scoped messages.

Invariants:
    - Routes contain no business rules: writes go through MessageLogic,
      responses through outcome_to_response
    - Reads return inactive messages too
    - GET by id raises ResourceNotFoundError (global handler renders 404)
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession

from message_api.api.outcome_responses import outcome_to_response
from message_api.core.domain_types import MessageId, OrganizationId
from message_api.core.errors import ErrorContext, ResourceNotFoundError
from message_api.infrastructure.database import get_db
from message_api.infrastructure.message_repository import SqlAlchemyMessageRepository
from message_api.schemas.message import (
    CreateMessageRequest, MessageResponse, UpdateMessageRequest,
)
from message_api.services.message_logic import MessageLogic

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/api/v1/organizations/{organization_id}/messages", tags=["messages"],
)


def get_message_logic(db: AsyncSession = Depends(get_db)) -> MessageLogic:
    """FastAPI dependency: MessageLogic over a request-scoped SQL store."""
    return MessageLogic(SqlAlchemyMessageRepository(db))


@router.get("", response_model=list[MessageResponse])
async def list_messages(
    organization_id: UUID, logic: MessageLogic = Depends(get_message_logic),
):
    """List every message of the organization."""
    messages = await logic.list_messages(OrganizationId(organization_id))
    return [MessageResponse.from_domain(m) for m in messages]


@router.get("/{message_id}", response_model=MessageResponse, name="get_message")
async def get_message(
    organization_id: UUID,
    message_id: UUID,
    logic: MessageLogic = Depends(get_message_logic),
):
    """Get one message."""
    message = await logic.get_message(
        OrganizationId(organization_id), MessageId(message_id),
    )
    if message is None:
        raise ResourceNotFoundError(
            "Message", str(message_id),
            ErrorContext(
                organization_id=str(organization_id), message_id=str(message_id),
            ),
        )
    return MessageResponse.from_domain(message)


@router.post("", response_model=MessageResponse, status_code=201)
async def create_message(
    organization_id: UUID,
    body: CreateMessageRequest,
    request: Request,
    logic: MessageLogic = Depends(get_message_logic),
) -> Response:
    """Create a message; 201 with Location on success."""
    outcome = await logic.create_message(
        OrganizationId(organization_id), body.title, body.content,
    )
    return outcome_to_response(outcome, request)


@router.put("/{message_id}", status_code=204)
async def update_message(
    organization_id: UUID,
    message_id: UUID,
    body: UpdateMessageRequest,
    request: Request,
    logic: MessageLogic = Depends(get_message_logic),
) -> Response:
    """Replace title, content and active flag."""
    outcome = await logic.update_message(
        OrganizationId(organization_id), MessageId(message_id),
        body.title, body.content, body.is_active,
    )
    return outcome_to_response(outcome, request)


@router.delete("/{message_id}", status_code=204)
async def delete_message(
    organization_id: UUID,
    message_id: UUID,
    request: Request,
    logic: MessageLogic = Depends(get_message_logic),
) -> Response:
    """Delete an active message."""
    outcome = await logic.delete_message(
        OrganizationId(organization_id), MessageId(message_id),
    )
    return outcome_to_response(outcome, request)
