"""
utils/ - Shared Helpers
=======================
Logging setup, timestamp conversion and the one-shot initialization guard.
"""
