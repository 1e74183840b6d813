from datetime import datetime
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from src.app.use_cases.taxes import UpdatePropertyTaxStatusUseCase
from src.app.use_cases.taxes.dtos import TaxStatusCommand
from src.app.use_cases.taxes.paid_state import apply_paid_state
from src.domain.entities import PropertyTax


def make_tax(**kwargs):
    return PropertyTax(
        id=uuid4(),
        property_id=uuid4(),
        tax_year=2024,
        tax_dec_no="TD-100",
        tax_amount=Decimal("1200.00"),
        due_date=datetime(2024, 3, 31),
        **kwargs,
    )


@pytest.fixture
def tax_uow(mock_uow):
    mock_uow.taxes = MagicMock()
    mock_uow.taxes.get_property_tax = AsyncMock()
    mock_uow.taxes.update_property_tax = AsyncMock(side_effect=lambda tax: tax)
    return mock_uow


def test_apply_paid_state_sets_paid_date():
    tax = make_tax()

    apply_paid_state(tax, True)

    assert tax.is_paid is True
    assert tax.paid_date is not None


def test_apply_paid_state_is_idempotent():
    """Marking an already paid record paid again keeps the original date"""
    paid_on = datetime(2024, 2, 1)
    tax = make_tax(is_paid=True, paid_date=paid_on)

    apply_paid_state(tax, True)

    assert tax.paid_date == paid_on


def test_apply_paid_state_unpaid_clears_date():
    tax = make_tax(is_paid=True, paid_date=datetime(2024, 2, 1))

    apply_paid_state(tax, False)

    assert tax.is_paid is False
    assert tax.paid_date is None


@pytest.mark.asyncio
async def test_mark_property_tax_paid(tax_uow, mock_invalidator, ctx):
    """Marking paid stamps the date, audits and notifies every user"""
    # Arrange
    tax = make_tax()
    tax_uow.taxes.get_property_tax.return_value = tax
    tax_uow.users.list_ids.return_value = [ctx.actor_id, uuid4(), uuid4()]

    # Act
    use_case = UpdatePropertyTaxStatusUseCase(tax_uow, mock_invalidator)
    result = await use_case.execute(ctx, tax.id, TaxStatusCommand(is_paid=True))

    # Assert
    assert result.is_ok()
    assert result.value.is_paid is True
    assert result.value.paid_date is not None

    audit_logs = tax_uow.audit_logs.create_many.call_args.args[0]
    assert audit_logs[0].changes == {"is_paid": True}
    assert len(tax_uow.notifications.create_many.call_args.args[0]) == 3
    mock_invalidator.revalidate_path.assert_called_once_with(
        f"/dashboard/properties?selected={tax.property_id}"
    )


@pytest.mark.asyncio
async def test_mark_property_tax_paid_twice_keeps_paid_date(tax_uow, mock_invalidator, ctx):
    # Arrange
    paid_on = datetime(2024, 2, 1)
    tax = make_tax(is_paid=True, paid_date=paid_on)
    tax_uow.taxes.get_property_tax.return_value = tax

    # Act
    use_case = UpdatePropertyTaxStatusUseCase(tax_uow, mock_invalidator)
    result = await use_case.execute(ctx, tax.id, TaxStatusCommand(is_paid=True))

    # Assert
    assert result.is_ok()
    assert result.value.paid_date == paid_on


@pytest.mark.asyncio
async def test_mark_property_tax_not_found(tax_uow, mock_invalidator, ctx):
    # Arrange
    tax_uow.taxes.get_property_tax.return_value = None

    # Act
    use_case = UpdatePropertyTaxStatusUseCase(tax_uow, mock_invalidator)
    result = await use_case.execute(ctx, uuid4(), TaxStatusCommand(is_paid=True))

    # Assert
    assert result.is_err()
    assert result.error.code == "PROPERTY_TAX_NOT_FOUND"
    tax_uow.commit.assert_not_called()
    tax_uow.audit_logs.create_many.assert_not_called()
