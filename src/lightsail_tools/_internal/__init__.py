"""Lightsail tools internal implementation details.

Nothing in this package is part of the public API.
"""
