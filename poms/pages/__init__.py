"""Server-rendered HTML pages behind the edge route policy."""

from poms.pages.routes import router

__all__ = ["router"]
