"""
Core domain models, numeric primitives, and JSON contracts.

This module contains the building blocks that are independent of the
wire format (decoded entities, uint256 bounds, result schema).
"""
