"""Valuer for cash-flow periods."""

from __future__ import annotations

from mcpricing.interfaces import Product, SimulationModel
from mcpricing.paths import PathVector
from mcpricing.products.period import Period
from mcpricing.valuers.base import BaseValuer


class PeriodValuer(BaseValuer):
    """
    Valuer for a single cash-flow period.

    present_value and forward_cash_flow are deliberately separate: the first
    uses the coupon as fixed on the fixing date, the second reads the coupon
    off the path at the final time and rebases with the numeraire at the
    initial time, which makes it a pathwise sample of the value conditional
    on the initial time (the regression target of American Monte Carlo).
    """

    def can_value(self, product: Product) -> bool:
        return isinstance(product, Period)

    def present_value(
        self, product: Product, evaluation_time: float, model: SimulationModel
    ) -> PathVector:
        """
        Value of the period's flows after evaluation_time, in units of the
        numeraire at evaluation_time:
        N(t) * [ C N_s / N(T_pay) - N_s / N(T_s) + N_e / N(T_e) ], sign flipped for payers.
        """
        assert isinstance(product, Period)
        period = product
        if evaluation_time >= period.payment_date:
            return PathVector.zero()

        notional_at_start = period.notional.value_at_start(period, model)
        numeraire_at_evaluation = model.numeraire(evaluation_time)
        numeraire_at_payment = model.numeraire(period.payment_date)

        if period.coupon_flow:
            values = self.coupon(period, model) * notional_at_start / numeraire_at_payment
            if period.exclude_accrued_interest and (
                period.period_start <= evaluation_time < period.period_end
            ):
                values = values * self._non_accrued_ratio(period, evaluation_time)
        else:
            values = PathVector.zero()

        if period.notional_flow:
            if period.period_start > evaluation_time:
                values = values.sub_ratio(
                    notional_at_start, model.numeraire(period.period_start)
                )
            if period.period_end > evaluation_time:
                values = values.add_ratio(
                    period.notional.value_at_end(period, model),
                    model.numeraire(period.period_end),
                )

        if period.payer:
            values = -values

        return values * numeraire_at_evaluation

    def forward_cash_flow(
        self,
        product: Product,
        initial_time: float,
        final_time: float,
        model: SimulationModel,
    ) -> PathVector:
        """
        Flows known at final_time, rebased with the numeraire at initial_time.

        If the payment date is not in [initial_time, final_time] only the
        notional repayment at period end can contribute.
        """
        assert isinstance(product, Period)
        period = product
        repaid = period.notional_flow and final_time >= period.period_end

        if initial_time >= period.payment_date or final_time < period.payment_date:
            if not repaid:
                return PathVector.zero()
            values = PathVector.zero()
        else:
            if period.coupon_flow:
                values = (
                    self.observed_coupon(period, final_time, model)
                    * period.notional.value_at_start(period, model)
                    / model.numeraire(period.payment_date)
                )
                if period.exclude_accrued_interest and (
                    period.period_start <= final_time < period.period_end
                ):
                    values = values * self._non_accrued_ratio(period, final_time)
            else:
                values = PathVector.zero()

        if repaid:
            values = values.add_ratio(
                period.notional.value_at_end(period, model),
                model.numeraire(period.period_end),
            )

        if period.payer:
            values = -values

        # Numeraire at initial_time, not final_time.
        return values * model.numeraire(initial_time)

    @staticmethod
    def coupon(period: Period, model: SimulationModel) -> PathVector:
        """Coupon as fixed on the fixing date (percentage, not discounted)."""
        return period.index.fixing_value(period.fixing_date, model) * period.daycount_fraction

    @staticmethod
    def observed_coupon(
        period: Period, evaluation_time: float, model: SimulationModel
    ) -> PathVector:
        """Coupon as read off the path at evaluation_time (percentage, not discounted)."""
        rate = period.index.fixing_value_at(evaluation_time, period.fixing_date, model)
        return rate * period.daycount_fraction

    @staticmethod
    def _non_accrued_ratio(period: Period, time: float) -> float:
        """Share of the coupon not yet accrued at time: 1 at period start, 0 at period end."""
        return (period.period_end - time) / (period.period_end - period.period_start)
