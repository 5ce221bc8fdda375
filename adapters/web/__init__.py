from adapters.web.app import create_app
from adapters.web.keys import SiteServices

__all__ = ["create_app", "SiteServices"]
