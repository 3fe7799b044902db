import uuid
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, Request, Response, status
from sqlalchemy.orm import Session

from ..db import get_db
from ..errors import Result
from ..repositories import TicketRepository
from ..schemas import TicketCreate, TicketRead, TicketUpdate
from ..services import tickets as tickets_service

router = APIRouter()

TICKET_ID_PATTERN = r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
NOT_FOUND_RESPONSE = {404: {"description": "Ticket not found."}}
BAD_REQUEST_RESPONSE = {400: {"description": "Invalid input data or ticket id."}}


def get_ticket_repository(db: Session = Depends(get_db)) -> TicketRepository:
    return TicketRepository(db)


def parse_ticket_id(
    ticket_id: Annotated[
        str,
        Path(
            description="UUID of the ticket",
            pattern=TICKET_ID_PATTERN,
            examples=["123e4567-e89b-12d3-a456-426614174000"],
        ),
    ],
) -> uuid.UUID:
    # Only the hyphenated form produced at creation; no hex, braced or urn ids.
    return uuid.UUID(ticket_id)


def _unwrap(result: Result):
    if not result.ok:
        raise HTTPException(status_code=result.error.status_code, detail=result.error.message)
    return result.value


@router.post(
    "",
    response_model=TicketRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new ticket",
    responses=BAD_REQUEST_RESPONSE,
)
def create_ticket(
    payload: TicketCreate,
    request: Request,
    response: Response,
    repo: TicketRepository = Depends(get_ticket_repository),
) -> TicketRead:
    ticket = _unwrap(tickets_service.create_ticket(repo, payload))
    response.headers["Location"] = str(request.url_for("get_ticket", ticket_id=ticket.id))
    return ticket


@router.get("", response_model=list[TicketRead], summary="Get all tickets")
def list_tickets(
    repo: TicketRepository = Depends(get_ticket_repository),
) -> list[TicketRead]:
    return _unwrap(tickets_service.list_tickets(repo))


@router.get(
    "/{ticket_id}",
    response_model=TicketRead,
    summary="Get a ticket by ID",
    responses={**BAD_REQUEST_RESPONSE, **NOT_FOUND_RESPONSE},
)
def get_ticket(
    ticket_id: uuid.UUID = Depends(parse_ticket_id),
    repo: TicketRepository = Depends(get_ticket_repository),
) -> TicketRead:
    return _unwrap(tickets_service.get_ticket(repo, ticket_id))


@router.patch(
    "/{ticket_id}",
    response_model=TicketRead,
    summary="Update a ticket",
    responses={**BAD_REQUEST_RESPONSE, **NOT_FOUND_RESPONSE},
)
def update_ticket(
    payload: TicketUpdate,
    ticket_id: uuid.UUID = Depends(parse_ticket_id),
    repo: TicketRepository = Depends(get_ticket_repository),
) -> TicketRead:
    return _unwrap(tickets_service.update_ticket(repo, ticket_id, payload))


@router.patch(
    "/{ticket_id}/mark-used",
    response_model=TicketRead,
    summary="Mark a ticket as used",
    description="Marks a ticket as used. This operation cannot be undone.",
    responses={**BAD_REQUEST_RESPONSE, **NOT_FOUND_RESPONSE},
)
def mark_ticket_used(
    ticket_id: uuid.UUID = Depends(parse_ticket_id),
    repo: TicketRepository = Depends(get_ticket_repository),
) -> TicketRead:
    return _unwrap(tickets_service.mark_ticket_used(repo, ticket_id))


@router.delete(
    "/{ticket_id}",
    status_code=status.HTTP_200_OK,
    response_class=Response,
    summary="Delete a ticket",
    description="Permanently deletes a ticket. This action cannot be undone.",
    responses={**BAD_REQUEST_RESPONSE, **NOT_FOUND_RESPONSE},
)
def delete_ticket(
    ticket_id: uuid.UUID = Depends(parse_ticket_id),
    repo: TicketRepository = Depends(get_ticket_repository),
) -> Response:
    _unwrap(tickets_service.delete_ticket(repo, ticket_id))
    return Response(status_code=status.HTTP_200_OK)
