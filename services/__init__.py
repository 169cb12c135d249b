"""
services/ - Business Logic Layer
================================
Orchestrates repositories and produces user-facing messages.
"""
