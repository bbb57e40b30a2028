"""
Turns raw form values into a LoanRequest.

Amounts are read like a browser reads a numeric text field; the term is read
as an integer, truncating any decimal part.
"""
import math
from typing import Any, Mapping, Union

from app.exceptions import InvalidLoanInput
from app.loan_calculator import LoanRequest

RawValue = Union[str, int, float]

# Field names used by the loan form.
AMOUNT_FIELD = "loanAmount"
RATE_FIELD = "interestRate"
TERM_FIELD = "loanTerm"


def _parse_float(value: RawValue, field: str) -> float:
    if isinstance(value, str):
        value = value.strip()
        if not value:
            raise InvalidLoanInput(f"{field} is required.", field=field)
    try:
        number = float(value)
    except (TypeError, ValueError) as e:
        raise InvalidLoanInput(f"{field} must be a number, got {value!r}.", field=field) from e
    if not math.isfinite(number):
        raise InvalidLoanInput(f"{field} must be a finite number.", field=field)
    return number


def _parse_int(value: RawValue, field: str) -> int:
    # "12.7" -> 12, "-3.9" -> -3
    return int(_parse_float(value, field))


def parse_loan_input(loan_amount: RawValue, interest_rate: RawValue, loan_term: RawValue) -> LoanRequest:
    """
    :param loan_amount: Principal as typed by the user
    :param interest_rate: Annual rate in percent
    :param loan_term: Number of monthly installments
    :return: LoanRequest ready for the calculator
    """
    return LoanRequest(
        principal=_parse_float(loan_amount, AMOUNT_FIELD),
        annual_rate_percent=_parse_float(interest_rate, RATE_FIELD),
        term_months=_parse_int(loan_term, TERM_FIELD),
    )


def parse_loan_fields(fields: Mapping[str, Any]) -> LoanRequest:
    for name in (AMOUNT_FIELD, RATE_FIELD, TERM_FIELD):
        if name not in fields or fields[name] is None:
            raise InvalidLoanInput(f"{name} is required.", field=name)
    return parse_loan_input(fields[AMOUNT_FIELD], fields[RATE_FIELD], fields[TERM_FIELD])
