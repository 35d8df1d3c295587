"""
Content domain.
"""
