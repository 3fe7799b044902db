import logging
import uuid

from sqlalchemy.exc import SQLAlchemyError

from ..errors import ErrorKind, Result
from ..models import Ticket
from ..models.base import next_timestamp, utcnow
from ..repositories import TicketRepository
from ..schemas import TicketCreate, TicketUpdate

logger = logging.getLogger(__name__)


def _storage_failure(repo: TicketRepository, action: str, exc: Exception) -> Result:
    repo.rollback()
    logger.exception("Failed to %s", action)
    return Result.failure(ErrorKind.STORAGE_FAILURE, f"Failed to {action}: {exc}")


def _not_found(ticket_id) -> Result:
    return Result.failure(ErrorKind.NOT_FOUND, f'Ticket with ID "{ticket_id}" not found')


def _lookup_failure(found: Result, action: str) -> Result:
    if found.error.kind is ErrorKind.NOT_FOUND:
        return found
    return Result.failure(found.error.kind, f"Failed to {action}: {found.error.message}")


def create_ticket(repo: TicketRepository, payload: TicketCreate) -> Result[Ticket]:
    now = utcnow()
    ticket = repo.create(
        event_name=payload.event_name,
        location=payload.location,
        time=payload.time,
        is_used=False,
        created_at=now,
        updated_at=now,
    )
    try:
        ticket = repo.save(ticket)
    except SQLAlchemyError as exc:
        return _storage_failure(repo, "create ticket", exc)
    logger.info("Created ticket %s for %r", ticket.id, ticket.event_name)
    return Result.success(ticket)


def list_tickets(repo: TicketRepository) -> Result[list[Ticket]]:
    try:
        return Result.success(repo.find())
    except SQLAlchemyError as exc:
        return _storage_failure(repo, "fetch tickets", exc)


def get_ticket(repo: TicketRepository, ticket_id: uuid.UUID) -> Result[Ticket]:
    try:
        ticket = repo.find_one(ticket_id)
    except SQLAlchemyError as exc:
        return _storage_failure(repo, "fetch ticket", exc)
    if ticket is None:
        return _not_found(ticket_id)
    return Result.success(ticket)


def update_ticket(
    repo: TicketRepository, ticket_id: uuid.UUID, payload: TicketUpdate
) -> Result[Ticket]:
    found = get_ticket(repo, ticket_id)
    if not found.ok:
        return _lookup_failure(found, "update ticket")

    ticket = found.value
    changes = payload.model_dump(exclude_unset=True)
    # A used ticket stays used.
    if ticket.is_used and changes.get("is_used") is False:
        return Result.failure(
            ErrorKind.VALIDATION, f'Ticket with ID "{ticket_id}" has already been used'
        )
    for field, value in changes.items():
        setattr(ticket, field, value)
    ticket.updated_at = next_timestamp(ticket.updated_at)
    try:
        return Result.success(repo.save(ticket))
    except SQLAlchemyError as exc:
        return _storage_failure(repo, "update ticket", exc)


def mark_ticket_used(repo: TicketRepository, ticket_id: uuid.UUID) -> Result[Ticket]:
    found = get_ticket(repo, ticket_id)
    if not found.ok:
        return _lookup_failure(found, "mark ticket as used")

    ticket = found.value
    ticket.is_used = True
    ticket.updated_at = next_timestamp(ticket.updated_at)
    try:
        return Result.success(repo.save(ticket))
    except SQLAlchemyError as exc:
        return _storage_failure(repo, "mark ticket as used", exc)


def delete_ticket(repo: TicketRepository, ticket_id: uuid.UUID) -> Result[None]:
    try:
        affected = repo.delete(ticket_id)
    except SQLAlchemyError as exc:
        return _storage_failure(repo, "delete ticket", exc)
    if affected == 0:
        return _not_found(ticket_id)
    logger.info("Deleted ticket %s", ticket_id)
    return Result.success()
