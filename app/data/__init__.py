"""
Data access layer.

Design rules:
- Views call ONLY get_users / create_user in data.service.
- Every remote call is wrapped to allow graceful fallback to mock data.
- No env var reads here (config-only).
"""
