"""Core: settings, exception handlers, lifespan and rate limiter."""
