from identity.api.routes import router as auth_router

__all__ = ["auth_router"]
