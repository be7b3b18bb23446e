"""User management input DTOs."""

from dataclasses import dataclass


@dataclass
class CreateUserInput:
    """Input for creating a user.

    Permissions come from, in order of precedence: ``copy_from_user_id``, the
    explicit ``apps``/``groups``/``features`` fields, the role defaults.
    """

    email: str
    first_name: str
    last_name: str
    role: str
    company: str = ""
    department: str | None = None
    apps: list[str] | None = None
    groups: list[str] | None = None
    features: list[str] | None = None
    copy_from_user_id: str | None = None


@dataclass
class UpdateUserInput:
    """Profile fields to change; ``None`` leaves a field untouched."""

    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    company: str | None = None
    department: str | None = None
