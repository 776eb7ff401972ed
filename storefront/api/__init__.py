"""
API layer for the storefront backend.

Exposes HTTP endpoints under /api (auth, user profile, cart, payment, health)
plus the exception handlers and middleware that shape every response.
"""
