from .tickets import TicketRepository

__all__ = ["TicketRepository"]
