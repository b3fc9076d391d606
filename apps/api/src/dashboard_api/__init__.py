"""Dashboard relay API for InstallerOS.

This FastAPI application:
- Receives Vapi call webhooks and creates GoHighLevel contacts
- Serves GHL contacts and merged Monday.com board items to the dashboard
"""

from dashboard_api.main import create_app

__all__ = ["create_app"]
