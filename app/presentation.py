from typing import Dict, Optional

from app.config import get_settings
from app.loan_calculator import PaymentBreakdown


def format_currency(value: float, symbol: Optional[str] = None, decimals: Optional[int] = None) -> str:
    """Formats a raw amount as e.g. "$855.49" or "-$5.00"."""
    settings = get_settings()
    symbol = settings.currency_symbol if symbol is None else symbol
    decimals = settings.display_decimals if decimals is None else decimals

    text = f"{abs(value):.{decimals}f}"
    # A value that rounds to zero never shows a minus sign.
    sign = "-" if round(value, decimals) < 0 else ""
    return f"{sign}{symbol}{text}"


def render_breakdown(breakdown: PaymentBreakdown) -> Dict[str, str]:
    return {
        "monthlyPayment": format_currency(breakdown.monthly_payment),
        "totalAmount": format_currency(breakdown.total_paid),
        "totalInterest": format_currency(breakdown.total_interest),
        "principalAmount": format_currency(breakdown.principal),
    }
