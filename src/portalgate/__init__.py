"""PortalGate - role and permission gated application portal."""

__version__ = "0.1.0"
