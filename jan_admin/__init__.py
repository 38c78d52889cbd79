"""Jan admin console.

Backend-for-frontend for the organization admin console: gates /admin
pages on the access-token cookie and proxies /api/jan/* to the Jan API.
"""
