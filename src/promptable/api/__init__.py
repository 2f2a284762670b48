"""
promptable.api

FastAPI host for mounted components.

Responsibilities:
- App factory, dependency wiring, and routers.
"""

# Package marker.
