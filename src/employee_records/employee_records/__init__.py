"""Employee Records package.

This package is organized by feature modules (identity, attendance, leaves,
employees) with SOLID service/repository layers over in-memory storage.
"""
