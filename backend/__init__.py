"""
Service wiring for the User Registry API: settings and the app factory.
"""
