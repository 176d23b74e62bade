from tabx.validation.audit import (
    AuditFinding,
    AuditReport,
    TabAuditor,
    ViolationType,
    create_tab_auditor,
)

__all__ = [
    "AuditFinding",
    "AuditReport",
    "TabAuditor",
    "ViolationType",
    "create_tab_auditor",
]
