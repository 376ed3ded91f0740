# -*- coding: utf-8 -*-
"""
Client side of the tracker: HTTP client, auth session and dashboard controller.
"""

from .dashboard import Dashboard
from .http import WellnessClient
from .session import AuthSession

__all__ = [
    'AuthSession',
    'Dashboard',
    'WellnessClient',
]
