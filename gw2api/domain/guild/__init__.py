"""
Guild domain.
"""
