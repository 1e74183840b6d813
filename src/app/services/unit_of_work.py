from abc import ABC, abstractmethod

from src.app.repositories.audit_log_repository import IAuditLogRepository
from src.app.repositories.document_repository import IDocumentRepository
from src.app.repositories.lease_repository import ILeaseRepository
from src.app.repositories.maintenance_request_repository import IMaintenanceRequestRepository
from src.app.repositories.notification_repository import INotificationRepository
from src.app.repositories.project_repository import IProjectRepository
from src.app.repositories.property_repository import IPropertyRepository, ITitleMovementRepository
from src.app.repositories.report_repository import IReportRepository
from src.app.repositories.task_repository import ITaskRepository
from src.app.repositories.tax_repository import ITaxRepository
from src.app.repositories.tenant_repository import ITenantRepository
from src.app.repositories.unit_repository import IUnitRepository
from src.app.repositories.user_repository import IUserRepository
from src.app.repositories.utility_repository import IUtilityRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    users: IUserRepository
    properties: IPropertyRepository
    title_movements: ITitleMovementRepository
    units: IUnitRepository
    tenants: ITenantRepository
    leases: ILeaseRepository
    taxes: ITaxRepository
    utilities: IUtilityRepository
    maintenance_requests: IMaintenanceRequestRepository
    documents: IDocumentRepository
    projects: IProjectRepository
    tasks: ITaskRepository
    audit_logs: IAuditLogRepository
    notifications: INotificationRepository
    reports: IReportRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
