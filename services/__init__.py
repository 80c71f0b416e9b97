"""
services/ - Service Layer
=========================
Thin request/response wrappers over the repositories.
Results are forwarded unchanged; repository errors propagate to the caller.
"""
