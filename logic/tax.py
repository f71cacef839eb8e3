from dataclasses import dataclass
from logic import tax_rules


def taxable_gain(balance: float, contributed: float) -> float:
    """
    Portion of a balance that is taxable appreciation.
    Principal (everything ever contributed) is never taxed.
    """
    return max(0.0, balance - contributed)


def after_tax(balance: float, contributed: float, tax_rate: float, applies: bool) -> float:
    """
    Value left after capital-gains tax on liquidating `balance`.

    When `applies` is False (tax switched off, or the time test exempts the
    gains) the balance is returned untouched.
    """
    if not applies:
        return balance
    return balance - taxable_gain(balance, contributed) * tax_rate


@dataclass
class CapitalGainsTax:
    rate: float = tax_rules.DEFAULT_CAPITAL_GAINS_RATE
    enabled: bool = True
    time_test_exempt: bool = False

    @classmethod
    def from_config(cls, config) -> "CapitalGainsTax":
        return cls(
            rate=config.tax_rate,
            enabled=config.apply_tax,
            time_test_exempt=config.time_test_exempt,
        )

    @property
    def applies(self) -> bool:
        return self.enabled and not self.time_test_exempt

    def tax_on(self, balance: float, contributed: float) -> float:
        if not self.applies:
            return 0.0
        return taxable_gain(balance, contributed) * self.rate

    def after_tax(self, balance: float, contributed: float) -> float:
        return after_tax(balance, contributed, self.rate, self.applies)
