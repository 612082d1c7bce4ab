"""
:Description: Thin wrappers around the digest functions provided by `hashlib`.
"""
