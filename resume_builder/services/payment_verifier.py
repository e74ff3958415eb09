"""
Payment Verifier
Server-side checks on the payment a client reports at checkout
"""
import logging
from decimal import Decimal
from typing import Optional

from sqlalchemy.orm import Session

from resume_builder.config import settings
from resume_builder.core.exceptions import PaymentError
from resume_builder.models import ResumeSubmission

logger = logging.getLogger(__name__)

STRICT = "strict"
TRUST = "trust"


def normalize_method(method: str) -> str:
    """Payment methods are stored lowercase"""
    return (method or "").strip().lower()


class PaymentVerifier:
    """Validate a reported payment before a submission is marked paid"""

    def __init__(
        self,
        mode: Optional[str] = None,
        price: Optional[float] = None,
        allowed_methods: Optional[list] = None
    ):
        self.mode = (mode or settings.PAYMENT_VERIFICATION_MODE).lower()
        self.price = Decimal(str(price if price is not None else settings.REVIEW_PRICE))
        self.allowed_methods = allowed_methods or settings.allowed_payment_methods_list

    def verify(self, db: Session, amount: float, method: str, transaction_id: str) -> None:
        """
        Check a reported payment

        Args:
            db: Database session
            amount: Amount the client reports as paid
            method: Payment method (card, upi, ...)
            transaction_id: Gateway transaction reference

        Raises:
            PaymentError: If the payment cannot be accepted
        """
        if normalize_method(method) not in self.allowed_methods:
            logger.warning(f"Rejected payment {transaction_id}: unsupported method {method}")
            raise PaymentError(f"Unsupported payment method: {method}")

        if self.mode == STRICT:
            if Decimal(str(amount)).quantize(Decimal("0.01")) != self.price.quantize(Decimal("0.01")):
                logger.warning(f"Rejected payment {transaction_id}: amount {amount} != {self.price}")
                raise PaymentError(f"Payment amount must be {self.price:.2f}")
        else:
            logger.warning(f"Accepting client-reported payment {transaction_id} without amount check")

        reused = db.query(ResumeSubmission.id).filter(
            ResumeSubmission.transaction_id == transaction_id,
            ResumeSubmission.payment_status == "paid"
        ).first()
        if reused:
            logger.warning(f"Rejected payment {transaction_id}: transaction already used")
            raise PaymentError("Transaction has already been used")
