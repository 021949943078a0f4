"""
Exposes the version of geotransforms
"""
__version__ = 'v0.1.0'
