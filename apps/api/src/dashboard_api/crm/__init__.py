"""GoHighLevel CRM integration.

Provides:
- Vapi webhook -> GHL contact forwarding
- Contact list pass-through for the dashboard
"""

from dashboard_api.crm.client import GHLClient
from dashboard_api.crm.service import (
    ContactService,
    ForwardResult,
    UnconfiguredContactService,
    UpstreamError,
    build_contact_service,
)

__all__ = [
    "ContactService",
    "ForwardResult",
    "GHLClient",
    "UnconfiguredContactService",
    "UpstreamError",
    "build_contact_service",
]
