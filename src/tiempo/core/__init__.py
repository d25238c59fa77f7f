"""
Core building blocks: configuration constants, domain types and the
input normalizer every other module is written against.
"""
