"""
Pydantic schemas for request/response validation
"""
from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import Any, Dict, List, Optional

from .domain.models import CatalogKind, NotificationKind, ToggleOutcome


# Notification schemas
class NotificationResponse(BaseModel):
    """Currently visible notification"""
    message: str
    kind: NotificationKind
    expires_in_ms: int


class NotificationStateResponse(BaseModel):
    """Notification channel state for a page"""
    page: str
    visible: bool
    notification: Optional[NotificationResponse] = None


# Catalog schemas
class ItemResponse(BaseModel):
    """Catalog item as seen by the current viewer"""
    id: int
    kind: CatalogKind
    category: str
    title: str
    description: str
    author: str
    tags: List[str] = []
    base_count: int
    displayed_count: int
    is_toggled: bool
    details: Dict[str, Any] = {}


class CatalogResponse(BaseModel):
    """Filtered catalog"""
    kind: CatalogKind
    category: str
    q: str
    items: List[ItemResponse]
    total: int
    empty_message: Optional[str] = None


class CategoriesResponse(BaseModel):
    """Category filter options"""
    kind: CatalogKind
    categories: List[str]


class ToggleResponse(BaseModel):
    """Result of toggling an item"""
    kind: CatalogKind
    item_id: int
    outcome: ToggleOutcome
    is_toggled: bool
    displayed_count: Optional[int] = None
    notification: NotificationResponse


class FavoritesResponse(BaseModel):
    """Items the viewer has toggled in a catalog"""
    kind: CatalogKind
    items: List[ItemResponse]
    total: int


class ListingsResponse(BaseModel):
    """The viewer's own posts, events and marketplace items"""
    posts: List[ItemResponse]
    events: List[ItemResponse]
    marketplace: List[ItemResponse]


# Session schemas
class SignInRequest(BaseModel):
    """Mock sign-in request, the password is not checked"""
    email: EmailStr
    password: str = Field(..., min_length=1)


class SignUpRequest(BaseModel):
    """Mock sign-up request, the password is not stored"""
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=1)


class UserStatsResponse(BaseModel):
    """Static profile stats"""
    posts_created: int = 0
    events_attended: int = 0
    items_sold: int = 0
    items_bought: int = 0

    class Config:
        from_attributes = True


class ProfileResponse(BaseModel):
    """Stored mock profile"""
    name: str
    email: str
    join_date: str
    avatar: str
    bio: Optional[str] = None
    phone: Optional[str] = None
    major: Optional[str] = None
    graduation_year: Optional[str] = None
    stats: UserStatsResponse

    class Config:
        from_attributes = True


class SessionResponse(BaseModel):
    """Signed-in or signed-out session"""
    signed_in: bool
    profile: Optional[ProfileResponse] = None
    notification: Optional[NotificationResponse] = None


class UpdateProfile(BaseModel):
    """Update profile request"""
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    bio: Optional[str] = Field(None, max_length=500)
    phone: Optional[str] = Field(None, max_length=32)
    major: Optional[str] = Field(None, max_length=100)
    graduation_year: Optional[str] = None

    @field_validator('graduation_year')
    @classmethod
    def validate_graduation_year(cls, v):
        """Validate graduation year format"""
        if v and not (v.isdigit() and len(v) == 4):
            raise ValueError('Graduation year must be a four digit year')
        return v


# Settings schemas
class PreferencesResponse(BaseModel):
    """Settings panel state"""
    notifications: Dict[str, bool]
    privacy: Dict[str, bool]
    theme: Dict[str, bool]
    notification: Optional[NotificationResponse] = None


class PreferenceToggleResponse(BaseModel):
    """Result of flipping one setting"""
    group: str
    name: str
    enabled: bool
    notification: NotificationResponse


# Contact schemas
class ContactRequest(BaseModel):
    """Contact form submission"""
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    subject: str = Field(..., min_length=1, max_length=200)
    message: str = Field(..., min_length=1, max_length=5000)


class MessageResponse(BaseModel):
    """Generic message response"""
    message: str
    success: bool = True
    notification: Optional[NotificationResponse] = None


class PagesResponse(BaseModel):
    """Client view routes"""
    routes: List[str]
