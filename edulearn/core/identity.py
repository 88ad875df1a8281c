from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class UserIdentity:
    id: int

    @property
    def is_admin(self) -> bool:
        return False


@dataclass(frozen=True)
class AdminIdentity:
    id: int
    is_admin: bool = False


Identity = Union[UserIdentity, AdminIdentity]
