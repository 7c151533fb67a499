from datetime import date, timedelta

from app.rules.money import round_half_up
from app.schemas.booking import ItemType
from app.schemas.reservation import CancellationFee, CancellationPolicy

# Item type → (free cancellation days before check-in, [(days before, fee %)])
POLICY_TABLE: dict[ItemType, tuple[int, list[tuple[int, int]]]] = {
    ItemType.tour: (2, [(1, 50), (0, 100)]),
    ItemType.hotel: (3, [(2, 25), (1, 50), (0, 100)]),
    ItemType.package: (7, [(5, 25), (3, 50), (1, 75), (0, 100)]),
}


def build_cancellation_policy(check_in: date, item_type: ItemType | str) -> CancellationPolicy:
    """Cancellation policy for an item type. Unknown types use the tour policy."""
    free_days, fees = POLICY_TABLE.get(item_type, POLICY_TABLE[ItemType.tour])
    return CancellationPolicy(
        free_cancellation_until=check_in - timedelta(days=free_days),
        cancellation_fees=[
            CancellationFee(days=days, fee_percentage=pct) for days, pct in fees
        ],
    )


def cancellation_fee_percentage(
    policy: CancellationPolicy, check_in: date, cancellation_date: date,
) -> int:
    """Fee percentage owed when cancelling on *cancellation_date*.

    Zero up to and including the free-cancellation day. After that the
    first tier whose ``days`` fits the remaining lead time applies; past
    check-in the highest tier applies.
    """
    if cancellation_date <= policy.free_cancellation_until:
        return 0

    days_until_check_in = (check_in - cancellation_date).days
    for fee in policy.cancellation_fees:
        if days_until_check_in >= fee.days:
            return fee.fee_percentage

    if not policy.cancellation_fees:
        return 0
    return max(f.fee_percentage for f in policy.cancellation_fees)


def cancellation_fee(
    amount: float, policy: CancellationPolicy, check_in: date, cancellation_date: date,
) -> int:
    pct = cancellation_fee_percentage(policy, check_in, cancellation_date)
    return round_half_up(amount * pct / 100)
