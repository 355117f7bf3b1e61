from .main import router

__all__ = ["router"]
