"""Versioned API routers and middleware."""
