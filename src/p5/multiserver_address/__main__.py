#!/usr/bin/env python3
# -*- coding: utf-8 -*-

if "__main__" == __name__:
    from ._entry_point import routine
    routine()
