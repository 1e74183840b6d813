from src.domain.base import utc_now


def apply_paid_state(tax, is_paid: bool) -> None:
    """
    Set is_paid and keep paid_date consistent with it.

    Re-applying the current state leaves paid_date untouched.
    """
    tax.is_paid = is_paid
    if not is_paid:
        tax.paid_date = None
    elif tax.paid_date is None:
        tax.paid_date = utc_now()
