"""
Validation engine core: rule sets, models, and the rule pipeline.
"""
