from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from django.utils import timezone


READ_ONLY_FIELDS = ('id', 'created_at', 'restaurant_count')


@dataclass
class Category:
    """A dish category offered across restaurants."""
    id: str
    name: str
    description: Optional[str] = None
    is_active: bool = True
    restaurant_count: int = 0
    created_at: datetime = field(default_factory=timezone.now)

    def __str__(self):
        return self.name

    @property
    def status(self):
        """Active flag expressed as a status so categories share the list filters."""
        return 'active' if self.is_active else 'inactive'
