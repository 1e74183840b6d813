from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.audit_log_repository import AuditLogRepository
from src.adapter.repositories.document_repository import DocumentRepository
from src.adapter.repositories.lease_repository import LeaseRepository
from src.adapter.repositories.maintenance_request_repository import MaintenanceRequestRepository
from src.adapter.repositories.notification_repository import NotificationRepository
from src.adapter.repositories.project_repository import ProjectRepository
from src.adapter.repositories.property_repository import PropertyRepository, TitleMovementRepository
from src.adapter.repositories.report_repository import ReportRepository
from src.adapter.repositories.task_repository import TaskRepository
from src.adapter.repositories.tax_repository import TaxRepository
from src.adapter.repositories.tenant_repository import TenantRepository
from src.adapter.repositories.unit_repository import UnitRepository
from src.adapter.repositories.user_repository import UserRepository
from src.adapter.repositories.utility_repository import UtilityRepository
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.users = UserRepository(self.session)
        self.properties = PropertyRepository(self.session)
        self.title_movements = TitleMovementRepository(self.session)
        self.units = UnitRepository(self.session)
        self.tenants = TenantRepository(self.session)
        self.leases = LeaseRepository(self.session)
        self.taxes = TaxRepository(self.session)
        self.utilities = UtilityRepository(self.session)
        self.maintenance_requests = MaintenanceRequestRepository(self.session)
        self.documents = DocumentRepository(self.session)
        self.projects = ProjectRepository(self.session)
        self.tasks = TaskRepository(self.session)
        self.audit_logs = AuditLogRepository(self.session)
        self.notifications = NotificationRepository(self.session)
        self.reports = ReportRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
