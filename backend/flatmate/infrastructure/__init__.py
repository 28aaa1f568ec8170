"""
Infrastructure Layer - Adapters for the domain ports.

- llm: OpenAI implementation of LLMClient
- persistence: in-memory and Prisma repository implementations
"""
