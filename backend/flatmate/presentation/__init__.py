"""
Presentation Layer - FastAPI routers and request dependencies.
"""
