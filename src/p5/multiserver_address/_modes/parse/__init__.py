#!/usr/bin/env python3
# -*- coding: utf-8 -*-

assert "__main__" != __name__

from ._class import Class, make
