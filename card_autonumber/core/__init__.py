"""
Core models, identifier logic and configuration.
"""
