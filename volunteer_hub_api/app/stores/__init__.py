"""
Persistence layer: key/value stores and the record collections built on them.
"""
