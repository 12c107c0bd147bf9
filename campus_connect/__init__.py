"""
Campus Connect Backend - root package.

This package contains the FastAPI app entry point (main.py), API routes,
domain logic (entities, invariants, relationship mutators) and the MongoDB
infrastructure behind the campus events, clubs, marketplace and posts API.
"""
