"""
Pydantic schema definitions for API payloads and stored records.

Each collection defines a ``...Create`` model for request bodies, a
record model and response envelopes.
"""
