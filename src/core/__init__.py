"""
Core domain models, exact arithmetic primitives, and input contracts.

This module contains the foundational building blocks that are independent
of the interpolation strategies and of any I/O.
"""
