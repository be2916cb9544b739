"""Pydantic schemas package.

Folder intent:
  common.py  CamelModel base, HealthResponse, SuccessResponse
  vendor.py  Vendor request DTOs and the VendorOut response model
"""
