from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Money:
    """Decimal backed monetary value. No currency handling."""

    value: Decimal = Decimal("0")

    @classmethod
    def from_string(cls, value: str) -> "Money":
        return cls(Decimal(value.strip()))

    def get_amount(self, decimals: int = 2) -> str:
        return f"{self.value:.{decimals}f}"

    def __str__(self) -> str:
        return self.get_amount()
