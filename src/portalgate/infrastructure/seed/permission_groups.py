"""Permission groups available out of the box."""

from portalgate.domain.entities import PermissionGroup


def build_groups() -> list[PermissionGroup]:
    return [
        PermissionGroup(
            id="executive-suite",
            name="Executive Suite",
            description="Full access to all financial applications",
            apps=frozenset({"market-forecast", "company-equity", "amex-review", "deferred-rent"}),
            icon="👔",
            color="bg-purple-500",
        ),
        PermissionGroup(
            id="finance-suite",
            name="Finance Suite",
            description="Financial planning and analysis tools",
            apps=frozenset({"market-forecast", "company-equity", "deferred-rent"}),
            icon="💰",
            color="bg-green-500",
        ),
        PermissionGroup(
            id="accounting-suite",
            name="Accounting Suite",
            description="Accounting and expense management",
            apps=frozenset({"amex-review", "deferred-rent"}),
            icon="📊",
            color="bg-blue-500",
        ),
        PermissionGroup(
            id="basic-access",
            name="Basic Access",
            description="Essential tools only",
            apps=frozenset({"market-forecast"}),
            icon="📈",
            color="bg-gray-500",
        ),
    ]
