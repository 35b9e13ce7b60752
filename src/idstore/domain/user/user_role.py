from dataclasses import dataclass


@dataclass(frozen=True)
class IdentityUserRole:
    """Association between one user and one role."""

    user_id: str
    role_id: str
