"""
VitaSnap nutrition scoring.

This package contains the product health scoring core of the VitaSnap
food scanner, organized after Domain-Driven Design principles.

Structure:
- domain/: Scoring engine, health conditions, dietary checks, product mapping
- application/: Use cases combining the domain services for one product
- tests/: Test suite (unit)
"""

__version__ = "1.0.0"
