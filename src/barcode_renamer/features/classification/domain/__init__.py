"""
Summary: Pure domain types and rules for barcode classification.
Why: Naming and sanitizing stay testable without touching the filesystem.
"""
