"""Single-user permission mutations shared by the per-user and bulk use cases.

Each function returns a new ``User`` (the input is left untouched) together
with the audit details describing what actually changed.
"""

from dataclasses import replace
from typing import Any

from portalgate.application.access_context import AccessContext
from portalgate.application.dto import AccessChange
from portalgate.domain.entities import RoleDefinition, User
from portalgate.domain.exceptions import ValidationError
from portalgate.domain.value_objects import WILDCARD, UserStatus


def validate_change(change: AccessChange, ctx: AccessContext) -> None:
    """Reject app or group ids that do not exist."""
    known_apps = ctx.catalog_ids | {WILDCARD}
    unknown_apps = sorted(set(change.apps) - known_apps)
    if unknown_apps:
        raise ValidationError(f"Unknown apps: {', '.join(unknown_apps)}")
    unknown_groups = sorted(set(change.groups) - set(ctx.groups))
    if unknown_groups:
        raise ValidationError(f"Unknown groups: {', '.join(unknown_groups)}")


def permissions_snapshot(user: User) -> dict[str, Any]:
    return {
        "apps": user.permissions.apps.to_ids(),
        "groups": sorted(user.permissions.groups),
        "features": list(user.permissions.features),
    }


def grant(user: User, change: AccessChange) -> tuple[User, dict[str, Any]]:
    """Idempotent union of apps and groups. Already-held ids are not reported."""
    perms = user.permissions
    before_apps = set(perms.apps.to_ids())
    new_grant = perms.apps.grant(change.apps)
    added_apps = sorted(set(new_grant.to_ids()) - before_apps)
    added_groups = sorted(set(change.groups) - perms.groups)

    updated = replace(
        user,
        permissions=replace(
            perms, apps=new_grant, groups=perms.groups | frozenset(change.groups)
        ),
    )
    details: dict[str, Any] = {
        "user": user.email,
        "added_apps": added_apps,
        "added_groups": added_groups,
    }
    if change.role is not None and change.role != user.role:
        details["role"] = {"from": user.role, "to": change.role}
        updated = replace(updated, role=change.role)
    return updated, details


def revoke(
    user: User, change: AccessChange, catalog_ids: frozenset[str]
) -> tuple[User, dict[str, Any]]:
    """Idempotent set difference of apps and groups."""
    perms = user.permissions
    before_apps = set(perms.apps.to_ids())
    new_grant = perms.apps.revoke(change.apps, catalog_ids)
    removed_apps = sorted(before_apps - set(new_grant.to_ids()))
    removed_groups = sorted(perms.groups & set(change.groups))

    updated = replace(
        user,
        permissions=replace(
            perms, apps=new_grant, groups=perms.groups - frozenset(change.groups)
        ),
    )
    return updated, {
        "user": user.email,
        "removed_apps": removed_apps,
        "removed_groups": removed_groups,
    }


def change_role(user: User, role: RoleDefinition) -> tuple[User, dict[str, Any]]:
    """Replace the role and reset permissions to the role defaults.

    Custom grants are discarded: the role is the baseline and customisation
    starts again from it. The discarded record is kept in the audit details.
    """
    updated = replace(user, role=role.id, permissions=role.default_permissions())
    return updated, {
        "user": user.email,
        "from": user.role,
        "to": role.id,
        "previous": permissions_snapshot(user),
    }


def change_status(user: User, status: UserStatus) -> tuple[User, dict[str, Any]]:
    updated = replace(user, status=status)
    return updated, {"user": user.email, "from": str(user.status), "to": str(status)}


def parse_status(value: str) -> UserStatus:
    try:
        return UserStatus(value)
    except ValueError as e:
        raise ValidationError(f"Unknown status: {value}") from e
