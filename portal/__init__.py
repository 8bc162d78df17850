"""
Backend package for the hotel admin panel and guest check-in portal.

This package provides a FastAPI application with storage, database and
Supabase client wrappers shared by the admin and guest-facing routes.
"""
