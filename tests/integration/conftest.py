from datetime import datetime, timedelta
from decimal import Decimal

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.adapter.services.path_invalidator import InMemoryPathInvalidator
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.app import create_app
from src.api.utils.jwt import generate_jwt
from src.depends import enable_sqlite_foreign_keys, get_path_invalidator, get_unit_of_work
from src.domain.base import utc_now
from src.domain.entities import (
    Lease,
    LeaseStatus,
    Payment,
    PaymentStatus,
    Property,
    PropertyTax,
    PropertyType,
    PropertyUtility,
    Tenant,
    Unit,
    UnitStatus,
    UnitTax,
    UnitUtilityAccount,
    User,
    UserRole,
    UtilityBill,
    UtilityType,
)


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    enable_sqlite_foreign_keys(engine)
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def invalidator():
    return InMemoryPathInvalidator()


@pytest_asyncio.fixture
async def client(session_factory, invalidator):
    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        async with session_factory() as session:
            yield SqlAlchemyUnitOfWork(session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_path_invalidator] = lambda: invalidator

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def user(db_session):
    user = User(email="manager@example.com", first_name="Maria", last_name="Santos", role=UserRole.admin)
    db_session.add(user)
    await db_session.commit()
    await db_session.refresh(user)
    return user


@pytest_asyncio.fixture
async def other_user(db_session):
    user = User(email="staff@example.com", first_name="Paolo", last_name="Lim", role=UserRole.staff)
    db_session.add(user)
    await db_session.commit()
    await db_session.refresh(user)
    return user


@pytest_asyncio.fixture
async def auth_headers(user):
    return {"Authorization": f"Bearer {generate_jwt(user.id)}"}


@pytest_asyncio.fixture
async def portfolio(db_session, user):
    """
    One property, one occupied 60 sqm unit out of 120 sqm leasable.

    Collected: 1500 (a pending 300 does not count)
    Taxes: 100 property + 50 unit
    Utilities: 30 property bill + 20 unit bill
    """
    now = utc_now()
    property = Property(
        property_code="HP-01",
        property_name="Harbor Point",
        title_no="TCT-1",
        lot_no="L-1",
        registered_owner="Harbor Holdings",
        leasable_area=120,
        address="1 Pier Road",
        property_type=PropertyType.commercial,
        total_units=1,
        created_by_id=user.id,
    )
    unit = Unit(
        property_id=property.id,
        unit_number="101",
        unit_area=60,
        rent_amount=Decimal("750.00"),
        status=UnitStatus.occupied,
    )
    tenant = Tenant(
        bp_code="BP-1",
        first_name="Ana",
        last_name="Reyes",
        email="ana@example.com",
        phone="0917",
        company="Reyes Trading",
        created_by_id=user.id,
    )
    lease = Lease(
        tenant_id=tenant.id,
        unit_id=unit.id,
        start_date=now - timedelta(days=30),
        end_date=now + timedelta(days=20),
        rent_amount=Decimal("750.00"),
        status=LeaseStatus.active,
    )
    property_utility = PropertyUtility(
        property_id=property.id,
        utility_type=UtilityType.water,
        provider="City Water",
        account_number="W-1",
    )
    unit_account = UnitUtilityAccount(
        unit_id=unit.id, utility_type=UtilityType.electricity, account_number="E-1"
    )
    period_start = datetime(now.year, now.month, 1)
    rows = [
        property,
        unit,
        tenant,
        lease,
        Payment(
            lease_id=lease.id,
            amount=Decimal("1000.00"),
            payment_status=PaymentStatus.completed,
            payment_date=now,
        ),
        Payment(
            lease_id=lease.id,
            amount=Decimal("500.00"),
            payment_status=PaymentStatus.completed,
            payment_date=now,
        ),
        Payment(
            lease_id=lease.id,
            amount=Decimal("300.00"),
            payment_status=PaymentStatus.pending,
            payment_date=now + timedelta(days=5),
        ),
        PropertyTax(
            property_id=property.id,
            tax_year=now.year,
            tax_dec_no="TD-1",
            tax_amount=Decimal("100.00"),
            due_date=now,
        ),
        UnitTax(
            unit_id=unit.id,
            tax_year=now.year,
            tax_dec_no="TD-2",
            tax_amount=Decimal("50.00"),
            due_date=now,
        ),
        property_utility,
        unit_account,
        UtilityBill(
            property_utility_id=property_utility.id,
            billing_period_start=period_start,
            billing_period_end=now,
            amount=Decimal("30.00"),
        ),
        UtilityBill(
            unit_utility_account_id=unit_account.id,
            billing_period_start=period_start,
            billing_period_end=now,
            amount=Decimal("20.00"),
        ),
    ]
    for row in rows:
        db_session.add(row)
        await db_session.flush()
    await db_session.commit()
    return {"property": property, "unit": unit, "tenant": tenant, "lease": lease}
