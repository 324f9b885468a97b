"""
Domain models - Core business entities
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Union


class CatalogKind(str, Enum):
    """Which catalog an item belongs to"""
    POSTS = "posts"
    EVENTS = "events"
    MARKETPLACE = "marketplace"


class NotificationKind(str, Enum):
    """Notification severity"""
    INFO = "info"
    SUCCESS = "success"
    ERROR = "error"


class ToggleOutcome(str, Enum):
    """Result of flipping an item's toggle"""
    ADDED = "added"
    REMOVED = "removed"


class Page(str, Enum):
    """Client views that own a notification channel"""
    HOME = "home"
    FEED = "feed"
    EVENTS = "events"
    MARKETPLACE = "marketplace"
    ACCOUNT = "account"
    PROFILE = "profile"
    SETTINGS = "settings"
    FAVORITES = "favorites"
    MYLISTINGS = "mylistings"


@dataclass(frozen=True)
class Item:
    """
    Catalog item (post, event or marketplace listing)

    `author` holds the post author, event organizer or item seller.
    `base_count` is the likes count for posts, attendee count for events
    and 0 for marketplace items.
    """
    id: int
    kind: CatalogKind
    category: str
    title: str
    description: str
    author: str
    tags: Tuple[str, ...] = ()
    base_count: int = 0
    details: Dict[str, Any] = field(default_factory=dict, hash=False, compare=False)

    def searchable_fields(self) -> Tuple[str, ...]:
        """Fields matched by free-text search"""
        return (self.title, self.description, self.author) + tuple(self.tags)


@dataclass
class UserStats:
    """Static profile stats shown on the account page"""
    posts_created: int = 0
    events_attended: int = 0
    items_sold: int = 0
    items_bought: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {
            "postsCreated": self.posts_created,
            "eventsAttended": self.events_attended,
            "itemsSold": self.items_sold,
            "itemsBought": self.items_bought,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UserStats":
        return cls(
            posts_created=int(data.get("postsCreated", 0)),
            events_attended=int(data.get("eventsAttended", 0)),
            items_sold=int(data.get("itemsSold", 0)),
            items_bought=int(data.get("itemsBought", 0)),
        )


# Stored keys of the stats object
STATS_KEYS = ("postsCreated", "eventsAttended", "itemsSold", "itemsBought")

# Stored key -> Profile attribute for the optional profile fields
OPTIONAL_PROFILE_FIELDS = {
    "bio": "bio",
    "phone": "phone",
    "major": "major",
    "graduationYear": "graduation_year",
}


@dataclass
class Profile:
    """Mock user profile kept under the session storage key"""
    name: str
    email: str
    join_date: str
    avatar: str
    bio: Optional[str] = None
    phone: Optional[str] = None
    major: Optional[str] = None
    graduation_year: Optional[str] = None
    stats: UserStats = field(default_factory=UserStats)
    # Unrecognised stored keys, written back untouched
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_storage(self) -> Dict[str, Any]:
        """Serialize to the stored JSON layout (camelCase keys)"""
        data: Dict[str, Any] = dict(self.extra)
        data.update({
            "name": self.name,
            "email": self.email,
            "joinDate": self.join_date,
            "avatar": self.avatar,
        })
        for key, attr in OPTIONAL_PROFILE_FIELDS.items():
            value = getattr(self, attr)
            if value is not None:
                data[key] = value
        data["stats"] = self.stats.to_dict()
        return data

    @classmethod
    def from_storage(cls, data: Any) -> "Profile":
        """
        Build a profile from stored JSON data

        Raises:
            ValueError: If the data is not a usable profile object
        """
        if not isinstance(data, dict):
            raise ValueError("Stored profile is not an object")
        if not data.get("name") or not data.get("email"):
            raise ValueError("Stored profile is missing name or email")
        for key in ("name", "email", "joinDate", "avatar", *OPTIONAL_PROFILE_FIELDS):
            value = data.get(key)
            if value is not None and not isinstance(value, str):
                raise ValueError(f"Stored profile field {key} is not a string")

        stats = data.get("stats")
        if stats is not None and not isinstance(stats, dict):
            raise ValueError("Stored profile stats is not an object")
        if stats and any(
            isinstance(stats.get(key), bool) or not isinstance(stats.get(key, 0), int)
            for key in STATS_KEYS
        ):
            raise ValueError("Stored profile stats must be whole numbers")

        known = {"name", "email", "joinDate", "avatar", "stats", *OPTIONAL_PROFILE_FIELDS}
        return cls(
            name=data["name"],
            email=data["email"],
            join_date=data.get("joinDate", ""),
            avatar=data.get("avatar", ""),
            stats=UserStats.from_dict(stats) if stats else UserStats(),
            extra={k: v for k, v in data.items() if k not in known},
            **{attr: data.get(key) for key, attr in OPTIONAL_PROFILE_FIELDS.items()},
        )


@dataclass(frozen=True)
class SignedOut:
    """No profile stored for the viewer"""
    signed_in: bool = field(default=False, init=False)


@dataclass(frozen=True)
class SignedIn:
    """Viewer has a stored profile"""
    profile: Profile
    signed_in: bool = field(default=True, init=False)


Session = Union[SignedOut, SignedIn]


@dataclass(frozen=True)
class Notification:
    """A transient status message"""
    message: str
    kind: NotificationKind
    shown_at: float
    expires_at: float
