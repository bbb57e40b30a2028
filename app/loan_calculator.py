import logging
from dataclasses import dataclass

from app.exceptions import InvalidLoanInput

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoanRequest:
    principal: float
    annual_rate_percent: float
    term_months: int


@dataclass(frozen=True)
class PaymentBreakdown:
    monthly_payment: float
    total_paid: float
    total_interest: float
    principal: float


def compute(request: LoanRequest) -> PaymentBreakdown:
    """
    Calculates the fixed monthly installment of an amortized loan.

    :param request: Principal, annual rate in percent and term in months
    :return: Monthly payment, total paid, total interest and the principal
    """
    term = request.term_months
    if term <= 0:
        raise InvalidLoanInput("term_months must be a positive integer.", field="term_months")

    monthly_rate = (request.annual_rate_percent / 100) / 12
    if monthly_rate == 0:
        monthly_payment = request.principal / term
    else:
        try:
            x = (1 + monthly_rate) ** term
        except OverflowError:
            # x / (x - 1) tends to 1 as the term grows
            monthly_payment = request.principal * monthly_rate
        else:
            monthly_payment = request.principal * monthly_rate * x / (x - 1)

    total_paid = monthly_payment * term
    total_interest = total_paid - request.principal
    logger.debug("monthly payment %r for %r", monthly_payment, request)

    return PaymentBreakdown(
        monthly_payment=monthly_payment,
        total_paid=total_paid,
        total_interest=total_interest,
        principal=request.principal,
    )


class PaymentCalculator:
    def compute(self, request: LoanRequest) -> PaymentBreakdown:
        return compute(request)
