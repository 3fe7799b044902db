import uuid

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from ..models import Ticket


class TicketRepository:
    """Storage access for ``tickets`` rows. Raises ``SQLAlchemyError`` on failure."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def create(self, **fields) -> Ticket:
        return Ticket(**fields)

    def find(self) -> list[Ticket]:
        return list(self.db.scalars(select(Ticket)))

    def find_one(self, ticket_id: uuid.UUID) -> Ticket | None:
        return self.db.get(Ticket, ticket_id)

    def save(self, ticket: Ticket) -> Ticket:
        self.db.add(ticket)
        self.db.commit()
        self.db.refresh(ticket)
        return ticket

    def delete(self, ticket_id: uuid.UUID) -> int:
        result = self.db.execute(delete(Ticket).where(Ticket.id == ticket_id))
        self.db.commit()
        return result.rowcount

    def rollback(self) -> None:
        self.db.rollback()
