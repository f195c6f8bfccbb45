"""
Shared code for the shop microservices

Configuration, logging, the Supabase table adapter and the resource
service contract used by every backend service.
"""

__version__ = "1.0.0"
