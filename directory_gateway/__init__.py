"""
Directory Gateway
REST gateway for groups, members, users and user profiles backed by Supabase
"""

__version__ = "1.0.0"
