import argparse
import json
import sys
from dataclasses import asdict
from typing import List, Optional

from app.config import configure_logging
from app.exceptions import InvalidLoanInput
from app.loan_calculator import compute
from app.loan_input import parse_loan_input
from app.presentation import render_breakdown

LABELS = {
    "monthlyPayment": "Monthly payment",
    "totalAmount": "Total amount paid",
    "totalInterest": "Total interest",
    "principalAmount": "Principal",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="loan-calc", description="Amortized loan payment calculator")
    parser.add_argument("--amount", required=True, help="Loan amount")
    parser.add_argument("--rate", required=True, help="Annual interest rate in percent")
    parser.add_argument("--term", required=True, help="Term in months")
    parser.add_argument("--json", action="store_true", help="Print raw numbers as JSON")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging()

    try:
        breakdown = compute(parse_loan_input(args.amount, args.rate, args.term))
    except InvalidLoanInput as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    if args.json:
        print(json.dumps(asdict(breakdown)))
        return 0

    for key, text in render_breakdown(breakdown).items():
        print(f"{LABELS[key]}: {text}")
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except Exception as e:
        print(f"::error::{e}")
        sys.exit(1)
