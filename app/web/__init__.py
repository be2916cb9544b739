"""View-side helpers.

Files:
  api_client.py  httpx client for the Vendor Resource API, used by the pages
  presenters.py  display formatting and form parsing for the templates
"""
