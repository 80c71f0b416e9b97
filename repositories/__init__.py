"""
repositories/ - Data Access Layer
==================================
Each repository encapsulates all SQL queries for a specific domain entity.
Repositories compose parameterized SELECTs from a filter and an order-by
string, and return immutable domain model objects.
"""
