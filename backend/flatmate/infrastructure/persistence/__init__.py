"""
Persistence Layer - Repository implementations.

memory: process-local store (demo mode and tests)
prisma: PostgreSQL via prisma-client-py, imported only when selected
"""
