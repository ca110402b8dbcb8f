"""Settlement calculator — commission, labor fee and net payout in centavos.

commission = round_half_up(gross * commission_rate_bps / 10000)
net        = gross - commission - labor_fee   (exact; may go negative)

Rounding happens only when deriving the commission. Integer half-up:
(gross * bps + 5000) // 10000 for non-negative gross.
"""

from dataclasses import dataclass
from decimal import Decimal

from src.fa_common.money import round_half_up

_BPS_DENOMINATOR = 10_000

DEFAULT_COMMISSION_RATE_BPS = 600  # 6%
DEFAULT_LABOR_FEE_CENTS = 2500  # ₱25.00


@dataclass(frozen=True)
class SettlementConfig:
    commission_rate_bps: int = DEFAULT_COMMISSION_RATE_BPS
    labor_fee_cents: int = DEFAULT_LABOR_FEE_CENTS

    def __post_init__(self) -> None:
        if not (0 <= self.commission_rate_bps <= _BPS_DENOMINATOR):
            raise ValueError(
                f"commission_rate_bps must be in [0, {_BPS_DENOMINATOR}], "
                f"got {self.commission_rate_bps}"
            )
        if self.labor_fee_cents < 0:
            raise ValueError(f"labor_fee_cents must not be negative, got {self.labor_fee_cents}")


@dataclass(frozen=True)
class SettlementBreakdown:
    gross_amount: int
    commission: int
    labor_fee: int
    net_to_supplier: int
    commission_rate_bps: int
    labor_fee_fixed: int

    @property
    def commission_rate(self) -> Decimal:
        """600 bps -> Decimal('0.06')."""
        return Decimal(self.commission_rate_bps) / _BPS_DENOMINATOR

    @property
    def is_payable(self) -> bool:
        return self.net_to_supplier >= 0


class SettlementCalculator:
    def __init__(self, config: SettlementConfig | None = None) -> None:
        self.config = config or SettlementConfig()

    def calculate_commission(self, gross_amount: int) -> int:
        if gross_amount < 0:
            raise ValueError(f"gross_amount must not be negative, got {gross_amount}")
        bps = self.config.commission_rate_bps
        return (gross_amount * bps + _BPS_DENOMINATOR // 2) // _BPS_DENOMINATOR

    def calculate_labor_fee(self) -> int:
        return self.config.labor_fee_cents

    def calculate_net_amount(
        self,
        gross_amount: int,
        commission: int | None = None,
        labor_fee: int | None = None,
    ) -> int:
        """gross - commission - labor_fee. Negative when fees exceed the sale."""
        if commission is None:
            commission = self.calculate_commission(gross_amount)
        if labor_fee is None:
            labor_fee = self.calculate_labor_fee()
        return gross_amount - commission - labor_fee

    def calculate_settlement(self, gross_amount: int) -> SettlementBreakdown:
        commission = self.calculate_commission(gross_amount)
        labor_fee = self.calculate_labor_fee()
        return SettlementBreakdown(
            gross_amount=gross_amount,
            commission=commission,
            labor_fee=labor_fee,
            net_to_supplier=gross_amount - commission - labor_fee,
            commission_rate_bps=self.config.commission_rate_bps,
            labor_fee_fixed=labor_fee,
        )


def calculate_lot_value(weight: int | float | str | Decimal, price_per_unit: int) -> int:
    """Lot value in centavos: weight (e.g. kg, fractional) x price per unit, half-up."""
    weight_dec = weight if isinstance(weight, Decimal) else Decimal(str(weight))
    return round_half_up(weight_dec * price_per_unit)


_default_calculator = SettlementCalculator()


def calculate_commission(gross_amount: int) -> int:
    return _default_calculator.calculate_commission(gross_amount)


def calculate_labor_fee() -> int:
    return _default_calculator.calculate_labor_fee()


def calculate_net_amount(
    gross_amount: int, commission: int | None = None, labor_fee: int | None = None
) -> int:
    return _default_calculator.calculate_net_amount(gross_amount, commission, labor_fee)


def calculate_settlement(gross_amount: int) -> SettlementBreakdown:
    return _default_calculator.calculate_settlement(gross_amount)
