from pydantic import BaseModel, Field
from typing import Any, Dict, Optional


class Principal(BaseModel):
    """Authenticated identity resolved from a bearer token"""

    id: Optional[str] = None
    email: Optional[str] = None
    user_metadata: Dict[str, Any] = Field(default_factory=dict)

    @property
    def full_name(self) -> Optional[str]:
        name = self.user_metadata.get("full_name")
        if isinstance(name, str) and name.strip():
            return name.strip()
        return None

    @classmethod
    def from_auth_user(cls, user: Any) -> "Principal":
        return cls(
            id=str(user.id) if getattr(user, "id", None) else None,
            email=getattr(user, "email", None),
            user_metadata=getattr(user, "user_metadata", None) or {},
        )
