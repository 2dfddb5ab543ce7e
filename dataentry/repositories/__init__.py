"""
Persistence adapters.

The people repository is the only code allowed to talk to the store; the
controller depends on it instead of opening sessions itself.
"""
