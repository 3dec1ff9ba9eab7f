"""Concrete ant types that defend the colony."""
