"""
NetDemo — Application Package Initializer
===========================================

What: Marks the `netdemo` directory as a Python package.
Who:  Used by uvicorn (`netdemo.main:app`), the `python -m netdemo` entry
      point, and pytest.

Architecture Note:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← status codes, headers, bodies
    ├─────────────────────────────────────┤
    │         Services (Demo Logic)       │  ← parsing, squaring, counter
    ├─────────────────────────────────────┤
    │         Schemas (JSON shapes)       │  ← Pydantic models
    └─────────────────────────────────────┘

    There is no persistence layer. The only state is the in-memory Counter
    owned by each application instance (see services/counter_service.py).
"""

__version__ = "1.0.0"
