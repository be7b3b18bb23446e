"""Command line client: serve the API or manage a local portal session."""

import argparse
import asyncio
import getpass
import logging
import sys

from portalgate import __version__
from portalgate.application.access_context import AccessContext, load_access_context
from portalgate.application.session import PortalSession
from portalgate.application.use_cases.auth.login import LoginUseCase
from portalgate.config import Settings, get_settings
from portalgate.domain.exceptions import PortalError
from portalgate.infrastructure.persistence.memory.unit_of_work import create_uow_factory
from portalgate.infrastructure.session.json_file_store import JsonFileSessionStore
from portalgate.main import create_portal_store, create_token_service, run_server

logger = logging.getLogger(__name__)


def build_session(settings: Settings) -> PortalSession:
    """Session bound to the on-disk session record and a freshly seeded store."""
    store = create_portal_store(settings)
    uow_factory = create_uow_factory(store)
    token_service = create_token_service(settings)

    async def _context() -> AccessContext:
        async with uow_factory() as uow:
            return await load_access_context(uow)

    session = PortalSession(
        store=JsonFileSessionStore(settings.session_file),
        token_service=token_service,
        login=LoginUseCase(
            unit_of_work_factory=uow_factory,
            token_service=token_service,
            password=settings.demo_password,
            delay_seconds=settings.login_delay_seconds,
        ),
        access=asyncio.run(_context()),
    )
    session.start()
    return session


def cmd_serve(args: argparse.Namespace, settings: Settings) -> int:
    if args.host:
        settings.host = args.host
    if args.port:
        settings.port = args.port
    run_server(settings)
    return 0


def cmd_login(args: argparse.Namespace, settings: Settings) -> int:
    session = build_session(settings)
    password = args.password if args.password is not None else getpass.getpass("Password: ")
    try:
        user = asyncio.run(session.login(args.email, password))
    except PortalError as e:
        print(f"Login failed: {e}", file=sys.stderr)
        return 1
    print(f"Logged in as {user.display_name} <{user.email}> ({user.role})")
    return 0


def cmd_whoami(args: argparse.Namespace, settings: Settings) -> int:
    session = build_session(settings)
    user = session.state.user
    if not session.state.is_authenticated or user is None:
        print("Not logged in", file=sys.stderr)
        return 1
    print(f"{user.display_name} <{user.email}>")
    print(f"role: {user.role}")
    print(f"status: {user.status}")
    return 0


def cmd_apps(args: argparse.Namespace, settings: Settings) -> int:
    session = build_session(settings)
    if not session.state.is_authenticated:
        print("Not logged in", file=sys.stderr)
        return 1
    try:
        session.refresh()
    except PortalError as e:
        print(str(e), file=sys.stderr)
        return 1
    for app in session.accessible_apps():
        print(f"{app.id:<24} {app.status:<12} {app.name}")
    return 0


def cmd_logout(args: argparse.Namespace, settings: Settings) -> int:
    session = build_session(settings)
    session.logout()
    print("Logged out")
    return 0


def cmd_version(args: argparse.Namespace, settings: Settings) -> int:
    print(f"PortalGate v{__version__}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="portalgate", description="PortalGate access portal")
    sub = parser.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", type=str, default=None, help="Bind address")
    serve.add_argument("--port", type=int, default=None, help="Bind port")
    serve.set_defaults(handler=cmd_serve)

    login = sub.add_parser("login", help="Log in and store the session")
    login.add_argument("email")
    login.add_argument("--password", type=str, default=None, help="Prompted when omitted")
    login.set_defaults(handler=cmd_login)

    sub.add_parser("whoami", help="Show the logged-in user").set_defaults(handler=cmd_whoami)
    sub.add_parser("apps", help="List applications you can open").set_defaults(handler=cmd_apps)
    sub.add_parser("logout", help="Clear the stored session").set_defaults(handler=cmd_logout)
    sub.add_parser("version", help="Print the version").set_defaults(handler=cmd_version)
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    args = build_parser().parse_args(argv)
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return args.handler(args, settings)


if __name__ == "__main__":
    sys.exit(main())
