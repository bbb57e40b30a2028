from typing import Optional

from pydantic import BaseModel, Field


class LoanCalculationRequest(BaseModel):
    principal: float = Field(..., ge=0, description="Loan amount")
    annual_rate_percent: float = Field(..., ge=0, description="Annual interest rate in percent")
    term_months: int = Field(..., gt=0, description="Number of monthly installments")


class LoanFormRequest(BaseModel):
    """Raw field values as submitted by the loan form."""

    loanAmount: Optional[str] = Field(None, description="Loan amount")
    interestRate: Optional[str] = Field(None, description="Annual interest rate in percent")
    loanTerm: Optional[str] = Field(None, description="Term in months")


class LoanDisplay(BaseModel):
    monthlyPayment: str
    totalAmount: str
    totalInterest: str
    principalAmount: str


class LoanCalculationResponse(BaseModel):
    monthly_payment: float = Field(..., description="Fixed monthly installment")
    total_paid: float = Field(..., description="Monthly payment times term")
    total_interest: float = Field(..., description="Total paid minus principal")
    principal: float = Field(..., description="Loan amount")
    display: LoanDisplay
