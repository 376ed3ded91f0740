# -*- coding: utf-8 -*-
"""Wellness entries: models, owner-scoped storage and CRUD endpoints."""
