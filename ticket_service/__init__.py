from ticket_service.errors import InvalidPurchase, RejectionReason
from ticket_service.models import TicketCategory, TicketRequest
from ticket_service.workflow import PurchaseValidator, validate_purchase

__all__ = [
    "InvalidPurchase",
    "RejectionReason",
    "TicketCategory",
    "TicketRequest",
    "PurchaseValidator",
    "validate_purchase",
]
