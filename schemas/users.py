from dataclasses import dataclass
from typing import Optional

@dataclass(frozen=True)
class UserContext:
    """Identity of the caller, resolved once per request from the bearer token."""
    user_id: str
    email: str
    study_cycle_id: Optional[int] = None
    rotation: Optional[str] = None

    @property
    def profile_complete(self) -> bool:
        return self.study_cycle_id is not None
