"""
Service layer abstraction.

Services encapsulate the business rules for a resource.  They operate
on the in-memory store from ``core.storage`` so that API handlers stay
free of validation and lookup logic.
"""
