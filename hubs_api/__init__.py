"""
Lambda Hubs API — Application Package Initializer
==================================================

What: Marks the `hubs_api` directory as a Python package.
Who:  Used by uvicorn, Alembic, and pytest (`from hubs_api.config import settings`).

Architecture Note:
    Two small REST applications share this package:

    ┌─────────────────────────────────────┐
    │      Routes (route groups)          │  ← verb + path → handler, status codes
    ├─────────────────────────────────────┤
    │      Controllers (optional)         │  ← named handler mapping (adopters)
    ├─────────────────────────────────────┤
    │      Services (data access)         │  ← one transaction per call
    ├─────────────────────────────────────┤
    │      Models & Schemas               │  ← SQLAlchemy ORM + Pydantic
    └─────────────────────────────────────┘

    - hubs:    hubs (parent) / messages (child)
    - shelter: adopters (parent) / dogs (child)

    Services are passed into the route-group builders explicitly, so an app can
    be assembled around a real database or a test double.
"""

__version__ = "1.0.0"
