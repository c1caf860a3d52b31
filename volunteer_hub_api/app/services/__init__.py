"""
Service layer.

Each service encapsulates the validation and creation rules for one
collection and works against an injected ``RecordStore``.
"""
