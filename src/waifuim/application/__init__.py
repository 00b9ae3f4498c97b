"""
Application Layer - Request building.

Contains:
- search: SearchQuery formatting
"""
