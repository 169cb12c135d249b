"""
models/ - Domain Models
=======================
Plain data holders passed between repositories, services and handlers.
"""
