"""HTTP demo server for HOLONET."""

from holonet.server.app import create_app

__all__ = ["create_app"]
