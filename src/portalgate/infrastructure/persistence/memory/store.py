"""In-memory data store shared by all units of work of one process."""

import copy
from dataclasses import dataclass, field, fields

from portalgate.domain.entities import (
    Announcement,
    Application,
    AuditLogEntry,
    ChatMessage,
    PermissionGroup,
    RoleDefinition,
    User,
)


@dataclass
class PortalStore:
    """All portal state. Lost when the process exits."""

    users: dict[str, User] = field(default_factory=dict)
    apps: list[Application] = field(default_factory=list)
    groups: dict[str, PermissionGroup] = field(default_factory=dict)
    roles: dict[str, RoleDefinition] = field(default_factory=dict)
    audit: list[AuditLogEntry] = field(default_factory=list)
    messages: dict[str, ChatMessage] = field(default_factory=dict)
    announcements: dict[str, Announcement] = field(default_factory=dict)

    def snapshot(self) -> "PortalStore":
        """Deep copy of every table except the audit log.

        Audit entries are frozen and only ever appended, so rolling the log
        back means truncating it to its length at snapshot time.
        """
        return PortalStore(
            **{
                f.name: copy.deepcopy(getattr(self, f.name))
                for f in fields(self)
                if f.name != "audit"
            }
        )

    def restore(self, snapshot: "PortalStore", audit_length: int) -> None:
        for f in fields(self):
            if f.name != "audit":
                setattr(self, f.name, getattr(snapshot, f.name))
        del self.audit[audit_length:]
