import pytest

from app.exceptions import InvalidLoanInput
from app.loan_calculator import LoanRequest
from app.loan_input import parse_loan_fields, parse_loan_input


def test_parse_form_strings():
    request = parse_loan_input("10000", "5", "12")
    assert request == LoanRequest(principal=10000.0, annual_rate_percent=5.0, term_months=12)


def test_whitespace_is_ignored():
    request = parse_loan_input(" 2500.50 ", "\t3.75", " 24 ")
    assert request.principal == 2500.5
    assert request.annual_rate_percent == 3.75
    assert request.term_months == 24


def test_term_decimal_part_is_truncated():
    assert parse_loan_input("1000", "5", "12.7").term_months == 12
    assert parse_loan_input("1000", "5", "-3.9").term_months == -3


def test_numbers_pass_through():
    request = parse_loan_input(1000, 0, 10)
    assert request == LoanRequest(1000.0, 0.0, 10)


@pytest.mark.parametrize("amount, rate, term, field", [
    ("", "5", "12", "loanAmount"),
    ("abc", "5", "12", "loanAmount"),
    ("1000", "  ", "12", "interestRate"),
    ("1000", "five", "12", "interestRate"),
    ("1000", "5", "", "loanTerm"),
    ("1000", "5", "twelve", "loanTerm"),
    ("nan", "5", "12", "loanAmount"),
    ("1000", "inf", "12", "interestRate"),
])
def test_invalid_values_name_the_field(amount, rate, term, field):
    with pytest.raises(InvalidLoanInput) as excinfo:
        parse_loan_input(amount, rate, term)
    assert excinfo.value.field == field
    assert field in str(excinfo.value)


def test_parse_fields_uses_form_names():
    fields = {"loanAmount": "1000", "interestRate": "0", "loanTerm": "10"}
    assert parse_loan_fields(fields) == LoanRequest(1000.0, 0.0, 10)


@pytest.mark.parametrize("missing", ["loanAmount", "interestRate", "loanTerm"])
def test_parse_fields_missing_key(missing):
    fields = {"loanAmount": "1000", "interestRate": "5", "loanTerm": "10"}
    del fields[missing]
    with pytest.raises(InvalidLoanInput) as excinfo:
        parse_loan_fields(fields)
    assert excinfo.value.field == missing


def test_parse_fields_none_value():
    with pytest.raises(InvalidLoanInput):
        parse_loan_fields({"loanAmount": None, "interestRate": "5", "loanTerm": "10"})
