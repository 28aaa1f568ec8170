"""
Lease analysis prompt and fallback text.
"""

LEASE_ANALYSIS_PROMPT = """You are a lease contract analysis expert. Please analyze the following lease agreement and provide:
1. A summary of key terms (rent, duration, deposit, etc.)
2. Any potentially problematic clauses
3. Important deadlines or dates to be aware of
4. Overall assessment of fairness

Lease text: {text}"""

LEASE_ANALYSIS_FALLBACK = (
    "[Offline mode] I can't reach my language model right now, so I can't analyze "
    "this lease. Please try again in a few minutes."
)


def build_lease_analysis_prompt(text: str) -> str:
    return LEASE_ANALYSIS_PROMPT.format(text=text.strip())
