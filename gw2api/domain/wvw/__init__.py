"""
WvW domain.
"""
