"""
Explicit session object for the signed-in user.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict


class Session(BaseModel):
    """Identity of the signed-in user, passed to whatever needs it."""
    model_config = ConfigDict(frozen=True)

    user_id: str
    role: str
    owner_id: Optional[str] = None
    username: Optional[str] = None
    full_name: Optional[str] = None

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"

    @property
    def scoped_owner_id(self) -> Optional[str]:
        """Owner id views should be restricted to, or None for the whole herd.

        Only farmers linked to an owner get a restricted view.
        """
        if self.role == "farmer" and self.owner_id:
            return self.owner_id
        return None
