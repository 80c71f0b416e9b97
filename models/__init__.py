"""
models/ - Domain Layer
======================
Immutable records returned by the repositories, and the filter and
request/response value types that travel with them.
"""
