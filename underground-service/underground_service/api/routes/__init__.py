from .catalogs import router as catalogs_router
from .contact import router as contact_router
from .favorites import router as favorites_router
from .listings import router as listings_router
from .notifications import router as notifications_router
from .session import router as session_router
from .settings import router as settings_router


__all__ = [
    # catalogs.py
    "catalogs_router",
    # contact.py
    "contact_router",
    # favorites.py
    "favorites_router",
    # listings.py
    "listings_router",
    # notifications.py
    "notifications_router",
    # session.py
    "session_router",
    # settings.py
    "settings_router",
]
