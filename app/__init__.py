# app/__init__.py
"""
Achievement progress API.

Read-only FastAPI service that renders a wallet's achievement progress,
grouped by category.
"""
