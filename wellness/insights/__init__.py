# -*- coding: utf-8 -*-
"""
Insights over wellness entries: filtering, summary, advice, dashboard state.
"""

from .advice import POSITIVE_TIPS, advise
from .filtering import DateRange, default_range, filter_entries
from .state import AppState, DashboardView, derive_view
from .summary import Summary, summarize

__all__ = [
    'AppState',
    'DashboardView',
    'DateRange',
    'POSITIVE_TIPS',
    'Summary',
    'advise',
    'default_range',
    'derive_view',
    'filter_entries',
    'summarize',
]
