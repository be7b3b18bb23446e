"""Demo users."""

from datetime import UTC, datetime

from portalgate.domain.entities import User, UserPermissions
from portalgate.domain.value_objects import UserStatus, app_grant_from_ids

COMPANY = "Acme Construction"


def _user(
    user_id: str,
    email: str,
    first_name: str,
    last_name: str,
    role: str,
    apps: list[str],
    features: list[str],
    department: str,
    created: str,
    groups: list[str] | None = None,
    status: UserStatus = UserStatus.ACTIVE,
) -> User:
    return User(
        id=user_id,
        email=email,
        first_name=first_name,
        last_name=last_name,
        role=role,
        permissions=UserPermissions(
            apps=app_grant_from_ids(apps),
            features=tuple(features),
            groups=frozenset(groups or ()),
        ),
        company=COMPANY,
        department=department,
        status=status,
        created_at=datetime.fromisoformat(created).replace(tzinfo=UTC),
    )


def build_users() -> list[User]:
    return [
        _user("user-1", "admin@acme.example", "John", "Admin", "admin",
              ["*"], ["all"], "IT", "2024-01-01"),
        _user("user-2", "manager@acme.example", "Sarah", "Manager", "manager",
              ["market-forecast", "project-management"], ["view_reports"],
              "Operations", "2024-01-01", groups=["finance-suite"]),
        _user("user-3", "foreman@acme.example", "Mike", "Foreman", "foreman",
              ["project-management", "equipment-tracking"], ["view_projects"],
              "Field Operations", "2024-01-01"),
        _user("user-4", "operator@acme.example", "David", "Operator", "operator",
              ["equipment-tracking"], ["view_equipment"], "Equipment", "2024-01-01"),
        _user("user-5", "jane.smith@acme.example", "Jane", "Smith", "manager",
              ["market-forecast", "reports-analytics"], ["view_reports"],
              "Finance", "2024-01-15", groups=["accounting-suite"]),
        _user("user-6", "carlos.rodriguez@acme.example", "Carlos", "Rodriguez", "foreman",
              ["project-management", "equipment-tracking"], ["view_projects"],
              "Field Operations", "2024-01-10"),
        _user("user-7", "new.user@acme.example", "New", "User", "operator",
              ["equipment-tracking"], ["view_equipment"], "Equipment", "2024-01-19",
              status=UserStatus.PENDING),
    ]
