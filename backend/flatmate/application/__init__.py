"""
APPLICATION LAYER - Use Cases & Orchestration

This layer contains:
- commands/  → Write operations (chat turn, delete conversation, appointments)
- queries/   → Read operations (history, conversations, listings, appointments)
- services/  → Orchestration helpers (LLM-backed extraction, per-conversation locks)
- dto/       → Data Transfer Objects
- common/    → Shared interfaces (Command, Query base classes)

Rules:
- Depends on the domain layer (and observability metrics) only
- No HTTP/framework code here
"""
