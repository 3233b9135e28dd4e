"""
Data models and contracts module.

Immutable data structures for children, weekly attendance patterns,
provider settings and quotation requests. Follows functional programming
principles with frozen dataclasses.
"""
