"""Role table - display metadata and per-role default permissions.

Adding a role means adding a row here; access resolution never switches on
role names other than the admin role.
"""

from portalgate.domain.entities import RoleDefinition
from portalgate.domain.value_objects import AllApps, IndividualApps


def build_roles() -> list[RoleDefinition]:
    return [
        RoleDefinition(
            id="admin",
            name="Administrator",
            description="Full system access and user management",
            capabilities=("all",),
            default_apps=AllApps(),
            default_groups=frozenset({"executive-suite"}),
            default_features=("all",),
            color="text-red-600",
        ),
        RoleDefinition(
            id="manager",
            name="Manager",
            description="Project oversight and planning access",
            capabilities=("view_reports", "manage_projects", "view_analytics"),
            default_apps=IndividualApps(frozenset({"market-forecast", "amex-review"})),
            default_groups=frozenset({"finance-suite"}),
            default_features=("view_reports", "edit_own_data", "export_data"),
            color="text-blue-600",
        ),
        RoleDefinition(
            id="foreman",
            name="Foreman",
            description="Field operations and equipment management",
            capabilities=("view_projects", "update_progress", "manage_equipment", "safety_oversight"),
            default_apps=IndividualApps(frozenset({"market-forecast"})),
            default_groups=frozenset({"basic-access"}),
            default_features=("view_projects", "edit_own_data"),
            color="text-green-600",
        ),
        RoleDefinition(
            id="operator",
            name="Operator",
            description="Equipment operation and status updates",
            capabilities=("view_equipment", "update_status", "view_safety"),
            default_apps=IndividualApps(),
            default_features=("view_equipment", "view_own_data"),
            color="text-yellow-600",
        ),
        RoleDefinition(
            id="user",
            name="User",
            description="Standard access to assigned applications",
            capabilities=("view_own_data",),
            default_apps=IndividualApps(),
            default_groups=frozenset({"basic-access"}),
            default_features=("view_own_data",),
            color="text-gray-600",
        ),
    ]
