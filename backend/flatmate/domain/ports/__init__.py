"""
PORTS - Interfaces that infrastructure implements

A "port" is an abstract interface that defines WHAT the domain needs,
without specifying HOW it's done.

- repositories/  → document store access (conversations, messages, listings, appointments)
- llm_client.py  → LLM provider (chat completion, JSON completion)
"""

from flatmate.domain.ports.llm_client import LLMClient

__all__ = ["LLMClient"]
