"""
Account domain.
"""
