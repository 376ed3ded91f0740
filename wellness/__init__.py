# -*- coding: utf-8 -*-
"""Personal wellness tracker: entry API, insights and exports."""

__version__ = "1.0.0"
