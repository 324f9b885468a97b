"""
Built-in catalogs for the feed, events board and marketplace
"""
from typing import Dict, List, Optional, Tuple

from ..domain.filters import ALL_CATEGORIES
from ..domain.models import CatalogKind, Item

# Author/organizer/seller name used for the viewer's own listings
OWN_LISTING_AUTHOR = "You"


def _post(id, author, content, category, likes, comments, timestamp) -> Item:
    return Item(
        id=id,
        kind=CatalogKind.POSTS,
        category=category,
        title="",
        description=content,
        author=author,
        base_count=likes,
        details={"comments": comments, "timestamp": timestamp},
    )


def _event(id, title, description, category, organizer, date, time, location,
           attendees, max_attendees, tags=(), featured=False, image="") -> Item:
    return Item(
        id=id,
        kind=CatalogKind.EVENTS,
        category=category,
        title=title,
        description=description,
        author=organizer,
        tags=tuple(tags),
        base_count=attendees,
        details={
            "date": date,
            "time": time,
            "location": location,
            "max_attendees": max_attendees,
            "is_featured": featured,
            "image": image,
        },
    )


def _listing(id, title, description, category, seller, price, condition,
             posted_date, location, tags=(), featured=False, images=(), is_active=True) -> Item:
    return Item(
        id=id,
        kind=CatalogKind.MARKETPLACE,
        category=category,
        title=title,
        description=description,
        author=seller,
        tags=tuple(tags),
        details={
            "price": price,
            "condition": condition,
            "posted_date": posted_date,
            "location": location,
            "is_featured": featured,
            "images": list(images),
            "is_active": is_active,
        },
    )


POST_CATEGORIES = ("Academic", "Campus Life", "Study Groups", "Social", "Food")

EVENT_CATEGORIES = ("Career", "Tech", "Study Groups", "Parties", "Concerts", "Clubs", "Sports", "Welcome Week")

MARKETPLACE_CATEGORIES = ("Electronics", "Books", "Clothing", "Furniture", "Other")


POSTS: Tuple[Item, ...] = (
    _post(1, "Sarah K.",
          "Just finished my CS 310 final! Anyone else feel like that was way harder than expected? "
          "At least we're done with data structures for now...",
          "Academic", 23, 8, "2 hours ago"),
    _post(2, "Mike R.",
          "Beautiful sunset at Mason Pond today! Sometimes we forget how lucky we are to have such "
          "a nice campus. Perfect study break spot.",
          "Campus Life", 45, 12, "1 day ago"),
    _post(3, "Jessica L.",
          "Study group for Statistics tomorrow at 3 PM in the library! We're covering hypothesis "
          "testing. All welcome!",
          "Study Groups", 18, 6, "2 days ago"),
    _post(4, "Daniel P.",
          "Anyone know if the Southside dining hall is open late during finals week?",
          "Food", 9, 14, "2 days ago"),
    _post(5, "Priya S.",
          "Intramural volleyball sign-ups close Friday. We need two more players for our team!",
          "Social", 31, 5, "3 days ago"),
    _post(6, OWN_LISTING_AUTHOR,
          "Just finished my first semester at GMU! The engineering program is amazing and the "
          "professors are so supportive. Can't wait for next semester!",
          "Academic", 24, 8, "3 days ago"),
    _post(7, OWN_LISTING_AUTHOR,
          "Study group forming for CS 310! We meet every Tuesday and Thursday at 6 PM in the "
          "Johnson Center. DM me if interested!",
          "Study Groups", 18, 12, "1 week ago"),
)

EVENTS: Tuple[Item, ...] = (
    _event(1, "Fall Career Fair 2025",
           "Connect with top employers and explore internship and full-time opportunities.",
           "Career", "Career Services", "2025-09-15", "10:00 AM - 4:00 PM", "Johnson Center",
           245, 500, tags=("career", "internships", "networking"), featured=True, image="\U0001F4BC"),
    _event(2, "HackGMU 2025",
           "48-hour hackathon bringing together students from all majors to build innovative solutions.",
           "Tech", "ACM Student Chapter", "2025-11-08", "6:00 PM Friday - 6:00 PM Sunday",
           "Engineering Building", 89, 150, tags=("hackathon", "coding", "prizes"), featured=True,
           image="\U0001F4BB"),
    _event(3, "Intro to Cloud Workshop",
           "Hands-on session deploying your first web app to the cloud.",
           "Tech", "Mason Cloud Club", "2025-10-02", "5:00 PM - 7:00 PM", "Nguyen Engineering 1103",
           34, 60, tags=("workshop", "cloud")),
    _event(4, "CS Study Marathon",
           "Join us for an all-day study session covering data structures and algorithms!",
           "Study Groups", OWN_LISTING_AUTHOR, "2025-08-15", "9:00 AM - 6:00 PM",
           "Engineering Building Room 1105", 12, 25, tags=("study", "algorithms"), image="\U0001F4BB"),
    _event(5, "Welcome Week Block Party",
           "Food trucks, music and student org tables on the quad.",
           "Welcome Week", "University Life", "2025-08-25", "4:00 PM - 9:00 PM", "North Plaza",
           410, 1000, tags=("music", "food"), featured=True, image="\U0001F389"),
    _event(6, "Patriots Basketball Home Opener",
           "Cheer on the Patriots at EagleBank Arena. Student section opens at 6 PM.",
           "Sports", "Mason Athletics", "2025-11-05", "7:00 PM", "EagleBank Arena",
           820, 2000, tags=("basketball", "athletics"), image="\U0001F3C0"),
)

MARKETPLACE_ITEMS: Tuple[Item, ...] = (
    _listing(1, "iPhone 14 Pro - Excellent Condition",
             "Selling my iPhone 14 Pro in excellent condition. Always kept in a case with screen protector.",
             "Electronics", "Alex M.", 850, "Excellent", "2025-08-05", "Campus",
             tags=("phone", "apple"), featured=True, images=("\U0001F4F1",)),
    _listing(2, "Gaming Laptop - ASUS ROG Strix",
             "ASUS ROG Strix gaming laptop with RTX 3070, 16GB RAM, 1TB SSD.",
             "Electronics", "Mike R.", 1200, "Like New", "2025-08-02", "Student Apartments",
             tags=("laptop", "gaming"), featured=True, images=("\U0001F4BB",)),
    _listing(3, "MacBook Pro 13\" - Excellent Condition",
             "2022 MacBook Pro with M2 chip, 16GB RAM, 512GB SSD. Perfect for students!",
             "Electronics", OWN_LISTING_AUTHOR, 1200, "Excellent", "2025-08-05", "Campus",
             tags=("laptop", "apple"), featured=True, images=("\U0001F4BB",)),
    _listing(4, "Calculus Textbook - Like New",
             "Calculus: Early Transcendentals by Stewart. Used for one semester.",
             "Books", OWN_LISTING_AUTHOR, 180, "Like New", "2025-08-01", "Student Union",
             tags=("textbook", "math"), images=("\U0001F4DA",)),
    _listing(5, "GMU Hoodie - Medium",
             "Official GMU hoodie in medium size. Barely worn.",
             "Clothing", OWN_LISTING_AUTHOR, 35, "Like New", "2025-07-28", "Campus",
             tags=("hoodie", "apparel"), images=("\U0001F455",), is_active=False),
    _listing(6, "IKEA Desk and Chair",
             "Sturdy desk with matching chair. Pickup only from Rappahannock.",
             "Furniture", "Jordan T.", 60, "Good", "2025-08-10", "Rappahannock River Deck",
             tags=("desk", "dorm"), images=("\U0001FA91",)),
)


_CATALOGS: Dict[CatalogKind, Tuple[Item, ...]] = {
    CatalogKind.POSTS: POSTS,
    CatalogKind.EVENTS: EVENTS,
    CatalogKind.MARKETPLACE: MARKETPLACE_ITEMS,
}

_CATEGORIES: Dict[CatalogKind, Tuple[str, ...]] = {
    CatalogKind.POSTS: POST_CATEGORIES,
    CatalogKind.EVENTS: EVENT_CATEGORIES,
    CatalogKind.MARKETPLACE: MARKETPLACE_CATEGORIES,
}


def get_catalog(kind: CatalogKind) -> Tuple[Item, ...]:
    """All items of a catalog, in display order"""
    return _CATALOGS[kind]


def get_categories(kind: CatalogKind) -> List[str]:
    """Category filter buttons, "All" first"""
    return [ALL_CATEGORIES, *_CATEGORIES[kind]]


def find_item(kind: CatalogKind, item_id: int) -> Optional[Item]:
    """Look up a catalog item by id, None if absent"""
    for item in _CATALOGS[kind]:
        if item.id == item_id:
            return item
    return None
