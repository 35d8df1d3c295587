"""
Core Layer

Descriptors, request building, the executor contract, configuration and errors.
"""
