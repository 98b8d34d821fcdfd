"""
Application Layer for the User Registry API.

This package contains:
- ports/: Abstract interfaces (what the application needs)
"""
