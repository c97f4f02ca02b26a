"""
Logging and metrics for the validation engine.
"""
