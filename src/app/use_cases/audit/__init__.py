"""
Audit Use Cases

Read access to the audit trail.
"""

from .get_audit_logs_use_case import GetAuditLogsUseCase

__all__ = [
    "GetAuditLogsUseCase",
]
