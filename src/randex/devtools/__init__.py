from .audit_store import AuditStore
from .stat_audit import StatisticalAuditService, chi_square

__all__ = ["AuditStore", "StatisticalAuditService", "chi_square"]
