#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Secure Scuttlebutt multiserver address parser.

    >>> _address = parse("net:192.168.178.17:8008~shs:HDOUC17/nBPzbVjT3+nUsLf/4p9lyIChEzMAxrHJQo4=")
    >>> _address.port
    8008
    >>> _address.pub_key.to_legacy_string()
    '@HDOUC17/nBPzbVjT3+nUsLf/4p9lyIChEzMAxrHJQo4=.ed25519'
"""

assert "__main__" != __name__

from ._common import errors

from ._common.errors import Error
from ._common.multikey import Class as Multikey
from ._common.address_type import Ip, Url, SocketFilePath
from ._common.address_type import Base as AddressType
from ._common.multiserver_address import Class as MultiserverAddress
from ._common.multiserver_address import join as format_many

from ._common import parse_address as parse
from ._common import parse_addresses as parse_many
