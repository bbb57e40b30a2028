import logging
from dataclasses import asdict

from fastapi import APIRouter, HTTPException

from app.exceptions import InvalidLoanInput
from app.loan_calculator import LoanRequest, PaymentBreakdown, PaymentCalculator
from app.loan_input import parse_loan_fields
from app.presentation import render_breakdown
from app.schemas.loan import LoanCalculationRequest, LoanCalculationResponse, LoanFormRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/loan", tags=["loan"])
calculator = PaymentCalculator()


def _to_response(breakdown: PaymentBreakdown) -> LoanCalculationResponse:
    return LoanCalculationResponse(**asdict(breakdown), display=render_breakdown(breakdown))


@router.post("/calculate", response_model=LoanCalculationResponse)
def calculate_loan(request: LoanCalculationRequest):
    loan = LoanRequest(
        principal=request.principal,
        annual_rate_percent=request.annual_rate_percent,
        term_months=request.term_months,
    )
    return _to_response(calculator.compute(loan))


@router.post("/calculate-form", response_model=LoanCalculationResponse)
def calculate_loan_form(request: LoanFormRequest):
    try:
        loan = parse_loan_fields(request.model_dump())
        breakdown = calculator.compute(loan)
    except InvalidLoanInput as e:
        logger.warning("rejected loan form (%s): %s", e.field, e)
        raise HTTPException(status_code=400, detail=str(e))
    return _to_response(breakdown)
