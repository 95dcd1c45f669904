"""Request Dependencies — hand the lifespan-built user store to route handlers.

Invariants:
    - The store lives on app.state, set once in lifespan; never a module global
    - Tests swap it with app.dependency_overrides[get_user_store]
"""

from fastapi import Request

from tracker.core.repository_protocols import UserRepository


def get_user_store(request: Request) -> UserRepository:
    """FastAPI dependency for the user document store."""
    store = getattr(request.app.state, "user_store", None)
    if store is None:
        raise RuntimeError("User store not initialized")
    return store
