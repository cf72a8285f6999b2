"""
Review Store Module.

Authoritative, append-only sequence of reviews plus the seed set
loaded at startup.
"""
