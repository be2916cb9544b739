"""Domain package: all ORM models are imported here so create_all sees them.

Folder intent:
  vendor.py  the Vendor table and its VendorStatus enum
  mixins.py  shared TimestampMixin
"""

from app.domain.vendor import Vendor, VendorStatus

__all__ = [
    "Vendor",
    "VendorStatus",
]
