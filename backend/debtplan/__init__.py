"""debtplan: debt amortization and what-if scenario engine."""

__version__ = "0.1.0"
