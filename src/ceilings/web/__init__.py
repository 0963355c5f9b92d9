"""REST API for ceiling lighting plans."""

from ceilings.web.app import create_app

__all__ = ["create_app"]
