"""Services package: all business logic lives here, never in routers.

Files:
  vendor.py  VendorService (list / get / create / update / delete)

Rule: routers call services, services call repositories, repositories call the DB.
      No SQLAlchemy queries in routers. No FastAPI imports in services.
"""
