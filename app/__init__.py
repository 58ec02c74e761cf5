"""
App module for the Users API.

Holds the environment-driven configuration shared by both Lambdas.
"""

__all__ = ["config"]
