"""
Storefront backend - root package.

FastAPI application (main.py) with user registration and login, bearer
token authorization, a per-user shopping cart and a payment endpoint.
"""
