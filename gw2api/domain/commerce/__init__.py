"""
Commerce domain.
"""
