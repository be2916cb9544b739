"""Routers package: HTTP endpoint definitions.

Files:
  vendors.py  JSON Resource API (/api/vendors, /api/vendors/{id})
  pages.py    HTML views (/, /vendors/new, /vendors/{id})

Rule: Routers only handle HTTP (request parsing, response shaping).
      The API delegates to app/services/; the pages call the API.
"""
