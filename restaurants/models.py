from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional

from django.utils import timezone


STATUS_ACTIVE = 'active'
STATUS_INACTIVE = 'inactive'
STATUS_BLOCKED = 'blocked'

STATUS_CHOICES = [
    (STATUS_ACTIVE, 'Active'),
    (STATUS_INACTIVE, 'Inactive'),
    (STATUS_BLOCKED, 'Blocked'),
]

STATUS_VALUES = tuple(value for value, _ in STATUS_CHOICES)

# Fields the platform assigns; edits never touch them
READ_ONLY_FIELDS = ('id', 'joined_date')


@dataclass
class Restaurant:
    """A restaurant on the platform, held in memory by the entity store."""
    id: str
    name: str
    cuisine: str
    owner_name: str
    phone: str
    email: str
    address: str
    city: str
    state: str
    status: str = STATUS_ACTIVE
    commission_rate: Decimal = Decimal('5.00')
    revenue: Decimal = Decimal('0.00')
    joined_date: datetime = field(default_factory=timezone.now)
    image_url: Optional[str] = None

    def __post_init__(self):
        if self.status not in STATUS_VALUES:
            raise ValueError(f"Invalid restaurant status: {self.status!r}")

    def __str__(self):
        return self.name

    @property
    def is_blocked(self):
        return self.status == STATUS_BLOCKED

    def get_status_display(self):
        return dict(STATUS_CHOICES)[self.status]
