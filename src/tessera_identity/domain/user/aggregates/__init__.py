from tessera_identity.domain.user.aggregates.user import User, UserProfile

__all__ = ["User", "UserProfile"]
