"""
Core infrastructure: settings, logging, error types and storage.
"""
