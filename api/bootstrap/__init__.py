"""
Schema bootstrap run once per process start.
"""
