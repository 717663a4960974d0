# -*- coding: utf-8 -*-
"""Stats domain: period filtering, aggregation and chart geometry.

Everything here is a pure function of an explicit snapshot of records plus
parameters such as ``period`` and ``now``.
"""
