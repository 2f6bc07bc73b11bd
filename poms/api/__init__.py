"""HTTP API: routers, endpoints and dependencies, mounted under /api."""
