"""
Domain Layer

Typed models for the /v2 endpoints, grouped by area.
"""
