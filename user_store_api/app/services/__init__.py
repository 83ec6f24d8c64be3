"""
Service layer abstraction.

Services encapsulate the business logic behind the API handlers.
"""
