"""
TenantNotes Backend - Multi-tenant Note Taking API

Tenant-isolated notes with plan quotas (free/pro) and admin/member roles.

Version: 1.0.0
"""

__version__ = "1.0.0"
