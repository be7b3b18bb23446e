"""Access resolution - which catalog applications a user may open.

The effective set is the union of three sources:

* individually granted ids (``AllApps`` expands to the whole catalog),
* the apps of every permission group the user belongs to,
* every catalog app whose ``required_roles`` lists the user's role.

Admins always receive the full catalog. Group ids that do not resolve to a
known group contribute nothing; they are never an error.
"""

from collections.abc import Iterable, Mapping, Sequence

from portalgate.domain.entities import ADMIN_ROLE, Application, PermissionGroup, User
from portalgate.domain.value_objects import AllApps, AppStatus, IndividualApps


def catalog_ids(catalog: Iterable[Application]) -> frozenset[str]:
    return frozenset(app.id for app in catalog)


def has_unrestricted_access(user: User) -> bool:
    """Admin role or wildcard grant."""
    return user.role == ADMIN_ROLE or isinstance(user.permissions.apps, AllApps)


def apps_granted_by_groups(
    group_ids: Iterable[str], groups: Mapping[str, PermissionGroup]
) -> frozenset[str]:
    """Union of the app ids of every known group in ``group_ids``."""
    result: set[str] = set()
    for group_id in group_ids:
        group = groups.get(group_id)
        if group is not None:
            result |= group.apps
    return frozenset(result)


def apps_for_role(role: str, catalog: Iterable[Application]) -> frozenset[str]:
    """Catalog apps that list ``role`` in their required roles."""
    return frozenset(app.id for app in catalog if role in app.required_roles)


def resolve_accessible_apps(
    user: User,
    catalog: Sequence[Application],
    groups: Mapping[str, PermissionGroup],
) -> frozenset[str]:
    """Definitive set of app ids the user may open."""
    if has_unrestricted_access(user):
        return catalog_ids(catalog)

    grant = user.permissions.apps
    individual = grant.ids if isinstance(grant, IndividualApps) else frozenset()
    return (
        individual
        | apps_granted_by_groups(user.permissions.groups, groups)
        | apps_for_role(user.role, catalog)
    )


def can_access_app(
    user: User,
    app_id: str,
    catalog: Sequence[Application],
    groups: Mapping[str, PermissionGroup],
) -> bool:
    """Membership test equivalent to ``app_id in resolve_accessible_apps(...)``."""
    if has_unrestricted_access(user):
        return any(app.id == app_id for app in catalog)
    return app_id in resolve_accessible_apps(user, catalog, groups)


def users_with_access(
    app_id: str,
    users: Iterable[User],
    catalog: Sequence[Application],
    groups: Mapping[str, PermissionGroup],
) -> set[str]:
    """Ids of users for whom ``can_access_app`` holds."""
    return {
        user.id for user in users if can_access_app(user, app_id, catalog, groups)
    }


def groups_containing_apps(
    app_ids: Iterable[str], groups: Mapping[str, PermissionGroup]
) -> list[PermissionGroup]:
    """Groups that bundle at least one of ``app_ids``."""
    wanted = set(app_ids)
    return [group for group in groups.values() if group.apps & wanted]


def active_apps(catalog: Iterable[Application]) -> list[Application]:
    return [app for app in catalog if app.status == AppStatus.ACTIVE]


def has_role(user: User, role: str) -> bool:
    """Role check where admin satisfies every role."""
    return user.role == ADMIN_ROLE or user.role == role
