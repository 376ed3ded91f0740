# -*- coding: utf-8 -*-
"""Identity: signup, login and bearer-token verification."""
