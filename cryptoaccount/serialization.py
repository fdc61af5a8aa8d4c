#
# Cryptoaccount -- Multi-currency Wallet Account Identity and Serialization
#
# Copyright (c) 2022, Dominion Research & Development Corp.
#
# Cryptoaccount is free software: you can redistribute it and/or modify it under
# the terms of the GNU General Public License as published by the Free Software
# Foundation, either version 3 of the License, or (at your option) any later
# version.  It is also available under alternative (eg. Commercial) licenses, at
# your option.  See the LICENSE file at the top of the source tree.
#
# Cryptoaccount is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS
# FOR A PARTICULAR PURPOSE. See the GNU General Public License for more details.
#
from __future__		import annotations

import logging
import struct

from typing		import Dict, Tuple

from .defaults		import SERIALIZE_VERSION, SERIALIZE_VERSIONS, ACCOUNT_KEY_SIZES, TIMESTAMP_MAX
from .util		import commas

__author__                      = "Perry Kundert"
__email__                       = "perry@dominionrnd.com"
__copyright__                   = "Copyright (c) 2022 Dominion Research & Development Corp."
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"

log				= logging.getLogger( __package__ )

#
# Account Serialization
#
#     All values are big-endian.  The checksum covers every byte following it; the size is that of
# the entire serialization (including the checksum and size).
#
#     checksum		2	Fletcher-16
#     size		4
#     version		2
#     timestamp		8	seconds since the epoch
#     for each crypto in SERIALIZE_VERSIONS[version]:
#         length	4
#         key		length
#
HEADER				= struct.Struct( '>HIHQ' )
LENGTH				= struct.Struct( '>I' )


class SerializationError( ValueError ):
    """The serialization is not a recognized, intact Account serialization."""


def fletcher16( data: bytes ) -> int:
    """The Fletcher-16 checksum of data."""
    lo,hi			= 0,0
    for b in data:
        lo			= ( lo + b ) % 255
        hi			= ( hi + lo ) % 255
    return hi << 8 | lo


def encode(
    timestamp: int,
    keys: Dict[str,bytes],
    version: int		= SERIALIZE_VERSION,
) -> bytes:
    """Encode the timestamp and each crypto's public key material required by the version (default:
    the current version).

    """
    cryptos			= SERIALIZE_VERSIONS[version]
    body			= b''.join(
        LENGTH.pack( len( keys[crypto] )) + bytes( keys[crypto] )
        for crypto in cryptos
    )
    size			= HEADER.size + len( body )
    tail			= HEADER.pack( 0, size, version, timestamp )[2:] + body
    return struct.pack( '>H', fletcher16( tail )) + tail


def decode( data: bytes ) -> Tuple[int, Dict[str,bytes]]:
    """Decode a current version serialization into its timestamp and each crypto's public key
    material, raising a SerializationError if it is not recognized or not intact.

    Older (and newer) versions are not decoded: they lack (or carry unknown) public key material, so
    the Account must be re-created from its paper key.

    """
    data			= bytes( data )
    if len( data ) < HEADER.size:
        raise SerializationError( f"Account serialization of {len( data )} bytes is truncated" )
    checksum,size,version,timestamp = HEADER.unpack_from( data )
    if size != len( data ):
        raise SerializationError( f"Account serialization of {len( data )} bytes; expected {size} bytes" )
    if checksum != fletcher16( data[2:] ):
        raise SerializationError( f"Account serialization checksum {checksum:#06x} is incorrect" )
    if version != SERIALIZE_VERSION:
        raise SerializationError( f"Account serialization version {version} not supported; only version {SERIALIZE_VERSION}" )
    if timestamp > TIMESTAMP_MAX:
        raise SerializationError( f"Account serialization timestamp {timestamp} exceeds {TIMESTAMP_MAX}" )

    keys			= {}
    offset			= HEADER.size
    for crypto in SERIALIZE_VERSIONS[version]:
        if offset + LENGTH.size > size:
            raise SerializationError( f"Account serialization truncated before {crypto} key" )
        length,			= LENGTH.unpack_from( data, offset )
        offset		       += LENGTH.size
        if length != ACCOUNT_KEY_SIZES[crypto]:
            raise SerializationError( f"Account serialization {crypto} key of {length} bytes; expected {ACCOUNT_KEY_SIZES[crypto]}" )
        if offset + length > size:
            raise SerializationError( f"Account serialization truncated within {crypto} key" )
        keys[crypto]		= data[offset:offset+length]
        offset		       += length
    if offset != size:
        raise SerializationError( f"Account serialization has {size - offset} unexpected trailing bytes" )
    log.debug( f"Decoded version {version} Account serialization w/ {commas( keys )} keys" )
    return timestamp, keys
