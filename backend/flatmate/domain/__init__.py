"""
DOMAIN LAYER - rental search chat core

This layer contains:
- Entities: Conversation, Message, Listing, Appointment
- Value Objects: typed ids and SearchFilters
- Ports: repository and LLM interfaces that infrastructure implements
- Services: pure domain logic (intent classification, heuristic extraction, reply text)
- Exceptions: domain-specific errors

RULES:
1. NO framework imports (no FastAPI, Prisma, Pydantic, OpenAI)
2. NO I/O operations
3. Only depends on Python stdlib
"""
