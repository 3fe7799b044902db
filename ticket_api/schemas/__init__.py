from .ticket import TicketCreate, TicketRead, TicketUpdate
from .validators import is_event_date, validate_event_date

__all__ = [
    "TicketCreate",
    "TicketRead",
    "TicketUpdate",
    "is_event_date",
    "validate_event_date",
]
