from app.services.auth import AuthService
from app.services.identity import IdentityCache, IdentityState
from app.services.seeding import seed_users

__all__ = ["AuthService", "IdentityCache", "IdentityState", "seed_users"]
