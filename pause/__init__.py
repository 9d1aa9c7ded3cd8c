"""
Pause

Asks a chat completion endpoint for one short self-reflection question
before the user opens a social media app.

Components:
- prompts: Fixed system/user prompt pair
- groq_client: Request encoding, HTTP transport, status check, decoding
- normalizer: Cleanup of model output into a single question
- fetcher: Fetch flow and screen state (idle/loading/success/error)
- api: Screen endpoints (trigger and state)
"""

__version__ = "0.1.0"
