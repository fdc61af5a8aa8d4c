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

import codecs
import logging
import struct

from typing		import Dict, Optional, Sequence

import base58
import hdwallet

from hdwallet		import cryptocurrencies

from .defaults		import ACCOUNT_PATHS, ACCOUNT_KEY_SIZES, SERIALIZE_VERSION, SERIALIZE_VERSIONS
from .phrase		import recover_seed, produce_phrase, validate_wordlist
from .serialization	import encode, decode, SerializationError
from .util		import commas, into_seconds

__author__                      = "Perry Kundert"
__email__                       = "perry@dominionrnd.com"
__copyright__                   = "Copyright (c) 2022 Dominion Research & Development Corp."
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"

log				= logging.getLogger( __package__ )


class RippleMainnet( cryptocurrencies.Cryptocurrency ):
    NAME = "Ripple"
    SYMBOL = "XRP"
    NETWORK = "mainnet"
    SOURCE_CODE = "https://github.com/ripple/rippled"
    COIN_TYPE = cryptocurrencies.CoinType({
        "INDEX": 144,
        "HARDENED": True
    })

    SCRIPT_ADDRESS = 0x05
    PUBLIC_KEY_ADDRESS = 0x00
    SEGWIT_ADDRESS = cryptocurrencies.SegwitAddress({
        "HRP": None,
        "VERSION": 0x00
    })

    EXTENDED_PRIVATE_KEY = cryptocurrencies.ExtendedPrivateKey({
        "P2PKH": 0x0488ade4,
        "P2SH": 0x0488ade4,
        "P2WPKH": None,
        "P2WPKH_IN_P2SH": None,
        "P2WSH": None,
        "P2WSH_IN_P2SH": None
    })
    EXTENDED_PUBLIC_KEY = cryptocurrencies.ExtendedPublicKey({
        "P2PKH": 0x0488b21e,
        "P2SH": 0x0488b21e,
        "P2WPKH": None,
        "P2WPKH_IN_P2SH": None,
        "P2WSH": None,
        "P2WSH_IN_P2SH": None
    })

    MESSAGE_PREFIX = None
    DEFAULT_PATH = f"m/44'/{str(COIN_TYPE)}/0'/0/0"
    WIF_SECRET_KEY = 0x80


class Identity:
    """The key material of a wallet Account, derived from a BIP-39 paper key: the public keys of each
    supported cryptocurrency, and the timestamp at which the Account's validity begins.  Only public
    key material is retained; the paper key is required to recover any private key.

    An Identity is a handle owned by exactly one Account, and released exactly once.  After release,
    any access raises a ValueError.

    """
    CRYPTOCURRENCIES		= SERIALIZE_VERSIONS[SERIALIZE_VERSION]

    # Cryptocurrencies whose address may be formatted directly from their public key (for
    # verification; addresses for use are derived elsewhere, eg. from the BTC master public key)
    CRYPTO_ADDRESSES		= ('ETH', 'XRP')

    # Any locally-defined python-hdwallet cryptocurrency definitions, and the base58 alphabet of
    # any whose addresses aren't in the Bitcoin alphabet used by python-hdwallet.
    CRYPTO_LOCAL		= dict(
        XRP		= RippleMainnet,
    )
    CRYPTO_ALPHABET		= dict(
        XRP		= base58.RIPPLE_ALPHABET,
    )

    def __init__( self, timestamp: int, keys: Dict[str,bytes] ):
        missing			= [ c for c in self.CRYPTOCURRENCIES if c not in keys ]
        if missing:
            raise ValueError( f"Identity requires public keys for {commas( missing, final='and' )}" )
        self._timestamp		= timestamp
        self._keys		= { c: bytes( keys[c] ) for c in self.CRYPTOCURRENCIES }
        self._owned		= False

    def __repr__( self ):
        if self.released:
            return f"{self.__class__.__name__}(released)"
        return f"{self.__class__.__name__}({commas( self._keys )} @{self._timestamp})"

    @property
    def released( self ) -> bool:
        return self._keys is None

    def _keys_held( self ) -> Dict[str,bytes]:
        if self._keys is None:
            raise ValueError( "Identity has been released" )
        return self._keys

    @property
    def timestamp( self ) -> int:
        self._keys_held()
        return self._timestamp

    def public_key( self, crypto: str ) -> bytes:
        return self._keys_held()[crypto.upper()]

    def address( self, crypto: str ) -> str:
        """Format the address of the public key held for crypto, using python-hdwallet."""
        crypto			= crypto.upper()
        if crypto not in self.CRYPTO_ADDRESSES:
            raise ValueError( f"{crypto} address not available; specify {commas( self.CRYPTO_ADDRESSES, final='or' )}" )
        wallet			= hdwallet.HDWallet( symbol=crypto, cryptocurrency=self.CRYPTO_LOCAL.get( crypto ))
        wallet.from_public_key( codecs.encode( self.public_key( crypto ), 'hex_codec' ).decode( 'ascii' ))
        address			= wallet.p2pkh_address()
        alphabet		= self.CRYPTO_ALPHABET.get( crypto )
        if alphabet:
            address		= base58.b58encode( base58.b58decode( address ), alphabet=alphabet ).decode( 'ascii' )
        return address

    def claim( self ) -> Identity:
        """Take exclusive ownership of the Identity, eg. by an Account.  An Identity may be owned only
        once; a second claim is a defect, and raises an AssertionError.

        """
        self._keys_held()
        if self._owned:
            raise AssertionError( "Identity already owned" )
        self._owned		= True
        return self

    def release( self ) -> None:
        """Drop the key material; the Identity is consumed, and may never be used (or released) again."""
        if self._keys is None:
            raise AssertionError( "Identity already released" )
        self._keys		= None


def derive_keys( seed: bytes ) -> Dict[str,bytes]:
    """Derive each supported cryptocurrency's public key material from a BIP-39 seed, via BIP-32
    derivation at its ACCOUNT_PATHS path.

    """
    wallet			= hdwallet.HDWallet( symbol="BTC" )
    wallet.from_seed( codecs.encode( seed, 'hex_codec' ).decode( 'ascii' ))
    # The BTC master public key identifies its parent (the root) by fingerprint
    fingerprint			= bytes.fromhex( wallet.finger_print() )
    keys			= {}
    for crypto,path in ACCOUNT_PATHS.items():
        wallet.clean_derivation()
        wallet.from_path( path )
        if crypto == 'BTC':
            key			= fingerprint + bytes.fromhex( wallet.chain_code() ) + bytes.fromhex( wallet.public_key( compressed=True ))
        elif crypto == 'ETH':
            key			= bytes.fromhex( wallet.uncompressed() )
            if len( key ) == 64:
                key		= b'\x04' + key		# python-hdwallet elides the uncompressed prefix
        else:
            key			= bytes.fromhex( wallet.public_key( compressed=True ))
        log.debug( f"Derived {crypto} public key at {path}" )
        keys[crypto]		= key
    wallet.clean_derivation()
    return keys


def keys_valid( keys: Dict[str,bytes] ) -> bool:
    """Confirm the structure of each crypto's public key material: its size, and the SEC1 prefix of
    each (compressed or uncompressed) public key.

    """
    for crypto,key in keys.items():
        if len( key ) != ACCOUNT_KEY_SIZES[crypto]:
            return False
        if crypto == 'BTC':
            prefix		= key[4+32]
        else:
            prefix		= key[0]
        if prefix not in ( (4,) if crypto == 'ETH' else (2, 3) ):
            log.info( f"Account {crypto} public key prefix {prefix:#04x} is invalid" )
            return False
    return True


#
# The Key Derivation Engine capabilities used by Account
#
def derive_from_phrase(
    phrase: str,
    timestamp: int,
    wordlist: Optional[Sequence[str]] = None,
) -> Optional[Identity]:
    """Deterministically derive an Identity from a BIP-39 paper key and timestamp (in seconds), or
    None if the phrase is not a valid BIP-39 phrase (in the supplied wordlist, if any; otherwise in
    any of the built-in languages).

    """
    timestamp			= into_seconds( timestamp )
    seed			= recover_seed( phrase, wordlist=wordlist )
    if seed is None:
        return None
    return Identity( timestamp, derive_keys( seed ))


def deserialize( data: bytes ) -> Optional[Identity]:
    """Restore an Identity from a prior serialization, or None if the data is not a recognized, intact
    serialization (eg. a prior format version, corrupted or truncated).  Never raises for malformed
    input; invalid input is an expected outcome.

    """
    if not data:
        log.info( "Empty Account serialization" )
        return None
    try:
        timestamp,keys		= decode( memoryview( data ))
    except TypeError as exc:
        log.info( f"Account serialization must be bytes-like: {exc}" )
        return None
    except ( SerializationError, struct.error ) as exc:
        log.info( f"Account serialization invalid: {exc}" )
        return None
    if not keys_valid( keys ):
        return None
    return Identity( timestamp, keys )


def serialize( identity: Identity ) -> bytes:
    """Serialize the Identity; always in the current, default format version."""
    return encode(
        identity.timestamp,
        { crypto: identity.public_key( crypto ) for crypto in SERIALIZE_VERSIONS[SERIALIZE_VERSION] },
    )


def generate_phrase( wordlist: Sequence[str] ) -> str:
    """Generate a 12-word BIP-39 paper key from secure entropy, using exactly the supplied
    locale-specific wordlist.  The wordlist must have exactly BIP39_WORDLIST_COUNT entries; an
    AssertionError is raised otherwise.

    """
    validate_wordlist( wordlist )
    return produce_phrase( wordlist )


def release( identity: Identity ) -> None:
    identity.release()
