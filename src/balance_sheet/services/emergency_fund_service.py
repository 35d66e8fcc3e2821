"""Emergency fund bucket summary."""

from decimal import Decimal

from balance_sheet.core.money import to_money
from balance_sheet.domain.models import EmergencyFundAccount, EmergencyFundStatus
from balance_sheet.domain.views import EmergencyFundSummary


class EmergencyFundService:
    """Compares the emergency fund with its target."""

    def summarize(
        self,
        account: EmergencyFundAccount,
        avg_monthly_expense: Decimal,
    ) -> EmergencyFundSummary:
        """
        Target = average monthly expense × target months.

        A fund that has ever traded an instrument counts as invested rather
        than liquid.
        """
        target = avg_monthly_expense * account.target_monthly_expenses
        current = account.current_balance
        status = EmergencyFundStatus.OK if current >= target else EmergencyFundStatus.BELOW_TARGET

        return EmergencyFundSummary(
            target_capital=to_money(target),
            current_capital=to_money(current),
            delta_to_target=to_money(target - current),
            status=status,
            is_liquid=not account.has_trades,
        )
