"""
Ledger service: append-only postings for both ACH sides.

Postings are never updated or deleted. Balances are never
stored: they are always derived from the postings, so they
are correct as long as the postings are.
"""

from sqlalchemy import select, func, case
from sqlalchemy.orm import Session

from ach_concourse.models.ledger_posting import LedgerPosting
from ach_concourse.models.enums import AchSide, Direction
from ach_concourse.schemas.ledger import LedgerPostingCreate, BalanceResponse


class LedgerService:
    """
    All ledger operations pass through this service.

    The service takes a database session as a constructor
    argument. This means the caller controls the transaction
    boundary; they decide when to commit or rollback.
    """

    def __init__(self, db: Session):
        self.db = db

    def create_posting(self, request: LedgerPostingCreate) -> LedgerPosting:
        """
        Record a single posting.

        Raises ValueError if the side or direction is missing
        or not one of the known values.
        """
        if not request.ach_side:
            raise ValueError("ach_side is required")
        if not request.direction:
            raise ValueError("direction is required")

        try:
            direction = Direction(request.direction)
        except ValueError:
            raise ValueError("direction must be DEBIT or CREDIT")

        try:
            ach_side = AchSide(request.ach_side)
        except ValueError:
            raise ValueError("ach_side must be ODFI or RDFI")

        posting = LedgerPosting(
            ach_side=ach_side,
            trace_number=request.trace_number,
            amount_cents=request.amount_cents,
            direction=direction,
            description=request.description,
        )
        self.db.add(posting)
        self.db.flush()
        return posting

    def list_postings(
        self, ach_side: str = "", trace_number: str = ""
    ) -> list[LedgerPosting]:
        """Return postings matching the optional filters, newest first."""
        query = select(LedgerPosting)
        if ach_side:
            try:
                query = query.where(LedgerPosting.ach_side == AchSide(ach_side))
            except ValueError:
                return []
        if trace_number:
            query = query.where(LedgerPosting.trace_number == trace_number)

        postings = self.db.execute(
            query.order_by(LedgerPosting.created_at.desc())
        ).scalars().all()
        return list(postings)

    def get_balances(self) -> BalanceResponse:
        """
        Sum every posting by direction.

        Net balance is credits minus debits.
        """
        total_debits, total_credits = self.db.execute(
            select(
                func.coalesce(func.sum(case(
                    (LedgerPosting.direction == Direction.DEBIT,
                     LedgerPosting.amount_cents),
                    else_=0,
                )), 0),
                func.coalesce(func.sum(case(
                    (LedgerPosting.direction == Direction.CREDIT,
                     LedgerPosting.amount_cents),
                    else_=0,
                )), 0),
            )
        ).one()

        return BalanceResponse(
            total_debits=int(total_debits),
            total_credits=int(total_credits),
            net_balance=int(total_credits) - int(total_debits),
        )
