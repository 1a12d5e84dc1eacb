# Import every model so Base.metadata is complete for create_all and Alembic
from tripsplit.models.event import Event
from tripsplit.models.member import Member
from tripsplit.models.transaction import Transaction
from tripsplit.models.split import Split

__all__ = ["Event", "Member", "Transaction", "Split"]
