"""Exception types raised by the payoff engine for rejected input."""


class DebtPlanError(Exception):
    """Base class for all debtplan errors."""


class InvalidAmortizationInput(DebtPlanError, ValueError):
    """Input the amortization model refuses to run (e.g. a negative rate)."""


class UnknownCurrency(DebtPlanError, KeyError):
    """Currency code with no formatting rules."""

    def __str__(self) -> str:
        return f"Unknown currency code: {self.args[0]!r}"
