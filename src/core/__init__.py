"""
Core domain models, collections, and contracts.

This module contains the flower shop building blocks that are independent
of the console demonstration.
"""
