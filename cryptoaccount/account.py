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
import weakref

from datetime		import datetime
from typing		import Optional, Sequence, Tuple, Union

from .			import engine
from .util		import into_seconds, from_seconds, now_seconds

__author__                      = "Perry Kundert"
__email__                       = "perry@dominionrnd.com"
__copyright__                   = "Copyright (c) 2022 Dominion Research & Development Corp."
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"

log				= logging.getLogger( __package__ )


class Account:
    """A multi-currency wallet Account: the root identity (public key material and timestamp)
    derived from a BIP-39 paper key, from which each blockchain's wallet is derived, along with an
    opaque, 'globally unique' uids String (eg. a wallet ID used by some external service).

    An Account is immutable.  It exclusively owns its engine.Identity, which is released exactly
    once: on close(), on leaving a 'with' block, or when the Account is garbage collected.  A
    released Account may not be used; any attempt raises a ValueError.

    Create an Account using one of:

      .create_from_phrase		-- from a BIP-39 paper key and timestamp
      .create_from_serialization	-- from a prior Account.serialize

    Either returns None if the supplied paper key or serialization is invalid.  Use
    .generate_phrase to produce a new paper key.

    """
    def __init__( self, identity: engine.Identity, uids: str ):
        self._identity		= identity.claim()	# Each Identity is owned by exactly one Account
        self._uids		= uids
        # Releases the Identity exactly once; either explicitly or when this Account is collected
        self._release		= weakref.finalize( self, engine.release, identity )

    def __repr__( self ):
        if self.released:
            return f"{self.__class__.__name__}({self._uids!r}, released)"
        return f"{self.__class__.__name__}({self._uids!r} @{self.timestamp.isoformat()})"

    def __enter__( self ):
        return self

    def __exit__( self, *exc ):
        self.close()

    def close( self ) -> None:
        """Release the Account's Identity now.  Idempotent."""
        if self._release.alive:
            log.debug( f"Releasing Account {self._uids!r}" )
        self._release()

    @property
    def released( self ) -> bool:
        return not self._release.alive

    @property
    def _core( self ) -> engine.Identity:
        if self.released:
            raise ValueError( f"Account {self._uids!r} has been released" )
        return self._identity

    @property
    def uids( self ) -> str:
        return self._uids

    @property
    def timestamp( self ) -> datetime:
        """The (UTC) time at which this Account's validity begins, with whole-second resolution.  This
        is carried by the Account's Identity, and is preserved through serialization.

        """
        return from_seconds( self._core.timestamp )

    @property
    def serialize( self ) -> bytes:
        """Serialize the Account.  The serialization is *always* in the current, default format."""
        return engine.serialize( self._core )

    @property
    def address_eth( self ) -> str:
        """The Ethereum address of the Account's ETH public key; for verification only."""
        return self._core.address( 'ETH' )

    @classmethod
    def create_from_phrase(
        cls,
        phrase: str,
        timestamp: Union[datetime,int,float],
        uids: str,
        wordlist: Optional[Sequence[str]] = None,
    ) -> Optional[Account]:
        """Recover an Account from a BIP-39 'paper key' (eg. 12 words) and the time at which the
        Account's validity begins (truncated to whole seconds).

        Returns the paper key's corresponding Account, or None if the paper key is invalid.  This is
        the only way to detect an invalid paper key.  If a locale-specific wordlist is supplied, the
        paper key must be valid in that wordlist; otherwise, in any built-in BIP-39 language.

        """
        identity		= engine.derive_from_phrase( phrase, into_seconds( timestamp ), wordlist=wordlist )
        if identity is None:
            log.info( f"Account {uids!r} not created; invalid paper key" )
            return None
        try:
            account		= cls( identity, uids )
        except Exception:
            engine.release( identity )
            raise
        log.info( f"Account {uids!r} created from paper key" )
        return account

    @classmethod
    def create_from_serialization(
        cls,
        serialization: Optional[bytes],
        uids: str,
    ) -> Optional[Account]:
        """Create an Account based on an Account serialization, ie. the result of a prior call to
        Account.serialize.

        Returns the serialization's corresponding Account, or None if the serialization is invalid.
        If the serialization is invalid then the Account *must be recreated* from its paper key.  A
        serialization will be invalid when the serialization format changes, which will *always
        occur* when a new blockchain is added.  For example, when XRP was added the XRP public key
        had to be serialized; the old serialization w/o the XRP public key is invalid, and the paper
        key is *required* in order to produce the XRP public key.

        """
        identity		= engine.deserialize( serialization )
        if identity is None:
            log.warning( f"Account {uids!r} not restored; invalid serialization requires re-creation from its paper key" )
            return None
        try:
            account		= cls( identity, uids )
        except Exception:
            engine.release( identity )
            raise
        log.info( f"Account {uids!r} restored from serialization" )
        return account

    @staticmethod
    def generate_phrase( wordlist: Sequence[str] ) -> Tuple[str, datetime]:
        """Generate a BIP-39 'paper key', returning it along w/ the current time (with whole-second
        resolution).  Use Account.create_from_phrase to get the Account.

        The wordlist is the locale-specific BIP-39-defined list of BIP39_WORDLIST_COUNT words; this
        is a precondition, and an AssertionError is raised if it is the wrong size.

        """
        phrase			= engine.generate_phrase( list( wordlist ))
        return phrase, from_seconds( now_seconds() )
