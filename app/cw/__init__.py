"""
Process-wide configuration.
"""
