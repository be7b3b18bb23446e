"""Application catalog."""

from portalgate.domain.entities import Application
from portalgate.domain.value_objects import AppStatus

DEFAULT_MARKET_FORECAST_URL = "http://localhost:3000"


def build_catalog(market_forecast_url: str = DEFAULT_MARKET_FORECAST_URL) -> list[Application]:
    """Catalog entries in display order."""
    return [
        Application(
            id="market-forecast",
            name="Market Forecast",
            description="Revenue and resource planning dashboard",
            url=market_forecast_url,
            icon="📊",
            color="bg-blue-500",
            required_roles=("admin", "manager"),
            status=AppStatus.ACTIVE,
            version="2.1.0",
            last_updated="2024-01-15",
        ),
        Application(
            id="company-equity",
            name="Company Equity",
            description="Track and manage company equity",
            url="/equity",
            icon="💼",
            color="bg-green-500",
            required_roles=("admin",),
            status=AppStatus.COMING_SOON,
            version="1.0.0",
        ),
        Application(
            id="amex-review",
            name="Amex Review",
            description="Corporate card statement review",
            url="/amex",
            icon="💳",
            color="bg-purple-500",
            required_roles=("admin", "manager"),
            status=AppStatus.COMING_SOON,
            version="1.0.0",
        ),
        Application(
            id="deferred-rent",
            name="Deferred Rent",
            description="Manage deferred rent agreements",
            url="/rent",
            icon="🏢",
            color="bg-yellow-500",
            required_roles=("admin",),
            status=AppStatus.COMING_SOON,
            version="1.0.0",
        ),
        Application(
            id="project-management",
            name="Project Management",
            description="Project schedules, milestones and progress",
            url="/projects",
            icon="🗂️",
            color="bg-indigo-500",
            required_roles=("admin", "manager", "foreman"),
            status=AppStatus.ACTIVE,
            version="1.4.2",
        ),
        Application(
            id="equipment-tracking",
            name="Equipment Tracking",
            description="Fleet location, hours and status updates",
            url="/equipment",
            icon="🚜",
            color="bg-orange-500",
            required_roles=("admin", "foreman", "operator"),
            status=AppStatus.ACTIVE,
            version="1.2.0",
        ),
        Application(
            id="safety-compliance",
            name="Safety & Compliance",
            description="Incident reporting and safety checklists",
            url="/safety",
            icon="🦺",
            color="bg-red-500",
            required_roles=("admin", "manager", "foreman"),
            status=AppStatus.ACTIVE,
            version="1.0.3",
        ),
        Application(
            id="inventory-management",
            name="Inventory Management",
            description="Materials and parts inventory",
            url="/inventory",
            icon="📦",
            color="bg-teal-500",
            required_roles=("admin", "manager"),
            status=AppStatus.MAINTENANCE,
            version="0.9.0",
        ),
        Application(
            id="reports-analytics",
            name="Reports & Analytics",
            description="Operational reports and dashboards",
            url="/reports",
            icon="📈",
            color="bg-cyan-500",
            required_roles=("admin", "manager"),
            status=AppStatus.ACTIVE,
            version="1.1.0",
        ),
    ]
