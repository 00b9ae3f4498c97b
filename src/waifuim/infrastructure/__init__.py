"""
Infrastructure Layer - transport-facing helpers.
"""
