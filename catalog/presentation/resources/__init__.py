"""REST collection resources.

Every module in this package is scanned at startup. Classes marked with
@collection become collections of the API.
"""
