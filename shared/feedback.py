"""
Guest feedback record shapes.

Nothing persists or serves these yet; they describe the records the admin
feedback screen works with.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from shared.types import (
    ContactMethod,
    ContactResult,
    FeedbackCategory,
    FeedbackPriority,
    FeedbackStatus,
    SentimentType,
)

MIN_RATING = 1
MAX_RATING = 5


@dataclass
class FeedbackNote:
    id: str
    text: str
    created_by: str
    created_at: str


@dataclass
class ContactAttempt:
    id: str
    method: ContactMethod
    status: ContactResult
    notes: str
    attempted_by: str
    attempted_at: str

    def __post_init__(self):
        self.method = ContactMethod(self.method)
        self.status = ContactResult(self.status)


@dataclass
class Feedback:
    """A single piece of guest feedback and its follow-up history."""

    id: str
    guest_name: str
    guest_email: str
    guest_phone: str
    room_number: str
    reservation_number: str
    check_out_date: str
    rating: int
    category: FeedbackCategory
    title: str
    comment: str
    sentiment: SentimentType
    status: FeedbackStatus
    priority: FeedbackPriority
    created_at: str
    updated_at: str
    word_count: int = 0
    ai_suggestions: List[str] = field(default_factory=list)
    is_contacted: bool = False
    contact_attempts: List[ContactAttempt] = field(default_factory=list)
    internal_notes: List[FeedbackNote] = field(default_factory=list)
    assigned_to: Optional[str] = None
    resolved_at: Optional[str] = None

    def __post_init__(self):
        if not MIN_RATING <= self.rating <= MAX_RATING:
            raise ValueError(
                f"rating must be between {MIN_RATING} and {MAX_RATING}, got {self.rating}"
            )
        # Enum fields only accept members of their closed sets.
        self.category = FeedbackCategory(self.category)
        self.sentiment = SentimentType(self.sentiment)
        self.status = FeedbackStatus(self.status)
        self.priority = FeedbackPriority(self.priority)
        if not self.word_count:
            self.word_count = len(self.comment.split())
