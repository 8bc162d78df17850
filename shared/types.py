"""
Closed enumerations shared by the portal API and the diagnostic scripts.
"""

from enum import StrEnum


class GuestStatus(StrEnum):
    CONFIRMED = "Confirmed"
    CHECKED_IN = "Checked In"
    CHECKED_OUT = "Checked Out"


class TokenStatus(StrEnum):
    ACTIVE = "active"
    USED = "used"
    EXPIRED = "expired"
    REVOKED = "revoked"


class BookingStatus(StrEnum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CHECKED_IN = "checked_in"
    CHECKED_OUT = "checked_out"
    CANCELLED = "cancelled"


class HotelStatus(StrEnum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    SUSPENDED = "suspended"


class OrderStatus(StrEnum):
    PENDING = "Pending"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


class IdType(StrEnum):
    IQAMA = "iqama"
    PASSPORT = "passport"
    NATIONAL_ID = "national_id"


class FeedbackStatus(StrEnum):
    NEW = "New"
    IN_PROGRESS = "In Progress"
    CONTACTED = "Contacted"
    RESOLVED = "Resolved"
    CLOSED = "Closed"


class FeedbackPriority(StrEnum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    URGENT = "Urgent"


class SentimentType(StrEnum):
    POSITIVE = "Positive"
    NEUTRAL = "Neutral"
    NEGATIVE = "Negative"


class FeedbackCategory(StrEnum):
    ROOM = "Room"
    SERVICE = "Service"
    FOOD = "Food"
    CLEANLINESS = "Cleanliness"
    STAFF = "Staff"
    AMENITIES = "Amenities"
    OTHER = "Other"


class ContactMethod(StrEnum):
    PHONE = "Phone"
    EMAIL = "Email"
    SMS = "SMS"
    WHATSAPP = "WhatsApp"


class ContactResult(StrEnum):
    SUCCESS = "Success"
    NO_ANSWER = "No Answer"
    FAILED = "Failed"
