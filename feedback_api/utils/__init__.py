"""
Utils package - shared utility functions.
"""
