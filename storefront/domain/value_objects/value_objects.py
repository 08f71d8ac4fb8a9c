"""Domain value objects - pure Python immutable types."""

import re
from dataclasses import dataclass
from decimal import (
    Context,
    Decimal,
    DivisionByZero,
    Inexact,
    InvalidOperation,
    Overflow,
    ROUND_HALF_EVEN,
)
from typing import Any, Union
from uuid import UUID, uuid4

from ..exceptions import InvalidAmount, InvalidFormat


# Arithmetic never touches the thread's ambient decimal context.
# 100 digits keeps sums and products of 28-digit amounts exact; a result
# that would need rounding traps instead.
MONEY_CONTEXT = Context(
    prec=100,
    rounding=ROUND_HALF_EVEN,
    traps=[InvalidOperation, DivisionByZero, Overflow, Inexact],
)

# Invariant-culture numeral: optional sign, optional ","-grouped thousands,
# optional "." fraction. No exponents, no NaN/Infinity.
_NUMERAL = re.compile(
    r"[+-]?(?:[0-9]{1,3}(?:,[0-9]{3})+|[0-9]*)(?:\.[0-9]*)?"
)

Scalar = Union[int, Decimal]


def _to_decimal(value: Any) -> Decimal:
    """Coerce int/float/Decimal to Decimal without binary noise."""
    if isinstance(value, bool):
        raise TypeError("Booleans are not numeric amounts")
    if isinstance(value, Decimal):
        return value
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        return Decimal(str(value))
    raise TypeError(f"Expected int or Decimal, got {type(value).__name__}")


def _exact(operation, *operands: Decimal) -> Decimal:
    """Run a MONEY_CONTEXT operation, mapping decimal traps to InvalidAmount."""
    try:
        return operation(*operands)
    except Overflow as e:
        raise InvalidAmount(operands[0], "Amount exceeds the representable range") from e
    except Inexact as e:
        raise InvalidAmount(operands[0], "Amount exceeds exact precision") from e


@dataclass(frozen=True, order=True)
class Money:
    """
    Immutable, non-negative monetary value.

    Equality, hashing and ordering are by exact decimal value, so
    Money(Decimal("1.0")) == Money(Decimal("1.00")). The scale of the
    amount is preserved; nothing is rounded.

    CRITICAL: Always use Decimal, never float!
    """
    amount: Decimal

    def __post_init__(self):
        try:
            amount = _to_decimal(self.amount)
        except TypeError:
            raise InvalidAmount(self.amount, "Amount must be a number") from None

        if not amount.is_finite():
            raise InvalidAmount(amount, "Amount must be finite")
        if amount < 0:
            raise InvalidAmount(amount)
        if amount.is_zero() and amount.is_signed():
            amount = amount.copy_abs()

        object.__setattr__(self, 'amount', amount)

    def __str__(self) -> str:
        return str(self.amount)

    # =========================================================================
    # FACTORIES
    # =========================================================================

    @classmethod
    def parse(cls, text: str) -> 'Money':
        """
        Parse a culture-invariant decimal numeral.

        Accepts "1234.56", "1,234.56", " +10 ", ".5".

        Raises:
            InvalidFormat: text is not a decimal numeral
            InvalidAmount: parsed value is negative
        """
        if not isinstance(text, str):
            raise InvalidFormat(text)

        candidate = text.strip()
        if not _NUMERAL.fullmatch(candidate) or not any(c.isdigit() for c in candidate):
            raise InvalidFormat(text)

        return cls.from_decimal(Decimal(candidate.replace(",", "")))

    @classmethod
    def from_decimal(cls, value: Scalar) -> 'Money':
        """Build Money from a Decimal (or int). Negative values are rejected."""
        if isinstance(value, bool):
            raise InvalidAmount(value, "Amount must be a number")
        return cls(amount=value)

    @classmethod
    def zero(cls) -> 'Money':
        """Additive identity."""
        return cls(amount=Decimal("0"))

    # =========================================================================
    # ARITHMETIC
    # =========================================================================

    def add(self, other: 'Money') -> 'Money':
        """
        Exact sum. The result is never negative.

        Raises:
            InvalidAmount: the sum cannot be held exactly in MONEY_CONTEXT
        """
        return Money(amount=_exact(MONEY_CONTEXT.add, self.amount, other.amount))

    def subtract(self, other: 'Money') -> 'Money':
        """
        Exact difference.

        Raises:
            InvalidAmount: other is larger than self, or the difference
                cannot be held exactly
        """
        result = _exact(MONEY_CONTEXT.subtract, self.amount, other.amount)
        if result < 0:
            raise InvalidAmount(result, "Subtraction would yield a negative amount")
        return Money(amount=result)

    def multiply(self, scalar: Scalar) -> 'Money':
        """
        Exact product with an integer or decimal scalar.

        Raises:
            InvalidAmount: the product would be negative, or cannot be
                held exactly
            TypeError: scalar is not an int or Decimal
        """
        if isinstance(scalar, float):
            raise TypeError("Multiplier must be an int or Decimal, not float")
        factor = _to_decimal(scalar)
        if not factor.is_finite():
            raise InvalidAmount(factor, "Multiplier must be finite")

        result = _exact(MONEY_CONTEXT.multiply, self.amount, factor)
        if result < 0:
            raise InvalidAmount(result, "Multiplication would yield a negative amount")
        return Money(amount=result)

    def is_zero(self) -> bool:
        """Check if amount is zero."""
        return self.amount == 0


@dataclass(frozen=True)
class ExecutionID:
    """Unique identifier for workflow execution tracing."""

    value: UUID

    @classmethod
    def generate(cls) -> "ExecutionID":
        """Generate a new ExecutionID."""
        return cls(value=uuid4())

    def __str__(self) -> str:
        """Return string representation."""
        return str(self.value)
