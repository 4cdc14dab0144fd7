#!/usr/bin/env python3
# -*- coding: utf-8 -*-

assert "__main__" != __name__

from . import errors
from . import multikey
from . import address_type
from . import multiserver_address
from . import mode
from . import cli_validator
from . import platform_info

from ._parse_address import routine as parse_address
from ._parse_address import many as parse_addresses

Mode = mode.Class
