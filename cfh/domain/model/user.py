"""User aggregate root.

Users register with email and password and level up through play.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from cfh.domain.model.common import DomainModel
from cfh.domain.value import UserId
from cfh.domain.value.types import Username


class User(DomainModel):
    """User aggregate root.

    ``password_hash`` is empty for accounts created through a social
    provider; those accounts cannot log in with a password.
    """

    id: UserId
    email: str  # Stored lower-case, unique
    username: Username  # Unique
    password_hash: Optional[str] = None
    display_name: Optional[str] = None
    avatar: Optional[str] = None
    bio: Optional[str] = Field(default=None, max_length=500)
    provider: str = "local"
    provider_id: Optional[str] = None
    level: int = Field(default=1, ge=1)
    xp: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
