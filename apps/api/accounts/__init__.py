"""
User account data-access package
"""
