# -*- coding: utf-8 -*-
"""Records domain (growth measurements and feeding events)."""
