"""Internal data schemas for parsed statement data.

These models represent transaction candidates extracted from a statement,
before the user reviews them and before anything is written to the ledger.
"""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

TransactionType = Literal["purchase", "payment", "other"]

MAX_INSTALLMENTS = 72


class ParsedTransaction(BaseModel):
    """A single line item detected in a statement."""

    model_config = ConfigDict(frozen=True)

    date: str = Field(..., description="Transaction date (YYYY-MM-DD)")
    description: str = Field(..., min_length=3, description="Cleaned description")
    amount: Decimal = Field(..., gt=0, description="Absolute amount in BRL")
    category_id: str | None = Field(None, description="Category registry id")
    selected: bool = Field(..., description="Proposed for import (purchases only)")
    is_installment: bool = Field(default=False)
    current_installment: int | None = Field(None, ge=1)
    total_installments: int | None = Field(None, ge=1, le=MAX_INSTALLMENTS)
    type: TransactionType = Field(default="purchase")

    @field_validator("date")
    @classmethod
    def date_is_iso(cls, v: str) -> str:
        """Ensure the date is a real calendar date in ISO format."""
        try:
            date.fromisoformat(v)
        except ValueError as e:
            raise ValueError(f"Invalid ISO date: {v}") from e
        return v

    @field_validator("description")
    @classmethod
    def description_not_blank(cls, v: str) -> str:
        """Ensure description is not just whitespace."""
        v = v.strip()
        if len(v) < 3:
            raise ValueError("Description must have at least 3 characters")
        return v

    @model_validator(mode="after")
    def check_consistency(self) -> "ParsedTransaction":
        if self.selected != (self.type == "purchase"):
            raise ValueError("Only purchases are selected by default")

        if self.is_installment:
            if self.current_installment is None or self.total_installments is None:
                raise ValueError("Installment transactions need current and total")
            if self.current_installment > self.total_installments:
                raise ValueError("Current installment exceeds total installments")
        elif self.current_installment is not None or self.total_installments is not None:
            raise ValueError("Installment numbers set on a non-installment transaction")
        return self


class ParseResult(BaseModel):
    """Outcome of parsing one statement file."""

    model_config = ConfigDict(frozen=True)

    transactions: list[ParsedTransaction] = Field(default_factory=list)
    total_amount: Decimal = Field(default=Decimal("0"))
    total_installment_groups: int = Field(default=0)
    warnings: list[str] = Field(default_factory=list)

    @classmethod
    def from_transactions(
        cls,
        transactions: Iterable[ParsedTransaction],
        warnings: Iterable[str] = (),
    ) -> "ParseResult":
        """Build a result, deriving the summary totals from the transactions."""
        transactions = list(transactions)
        total_amount = sum(
            (t.amount for t in transactions if t.selected), Decimal("0")
        )
        return cls(
            transactions=transactions,
            total_amount=total_amount,
            total_installment_groups=sum(1 for t in transactions if t.is_installment),
            warnings=list(warnings),
        )

    @classmethod
    def empty(cls, warning: str) -> "ParseResult":
        """Empty result carrying a single warning."""
        return cls(warnings=[warning])
