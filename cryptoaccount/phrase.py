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

import functools
import logging

from typing		import Optional, Sequence

import shamir_mnemonic

from mnemonic		import Mnemonic			# Requires passphrase as str

from .defaults		import BIP39_WORDLIST_COUNT, BITS_DEFAULT, BITS_BIP39, PHRASE_LANGUAGE_DEFAULT
from .util		import commas

__author__                      = "Perry Kundert"
__email__                       = "perry@dominionrnd.com"
__copyright__                   = "Copyright (c) 2022 Dominion Research & Development Corp."
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"

log				= logging.getLogger( __package__ )

#
# BIP-39 Paper Key generation and validation
#
#     NEVER log (or include in any Exception) a paper key phrase, or any of its words!  Some
# python-mnemonic errors (eg. from Mnemonic.detect_language) include the offending word, so we
# don't use them here, and never report the text of any Exception raised while handling a phrase.
#


def validate_wordlist( wordlist: Sequence[str] ) -> None:
    """Confirm that a caller-supplied, locale-specific BIP-39 wordlist has exactly the standard
    number of entries, before using it to produce a paper key.

    This is a precondition, not a recoverable error: a wrongly sized wordlist is a defect in the
    caller's configuration.  We raise the AssertionError explicitly (rather than using an assert
    statement), so it cannot be optimized away; we never truncate or pad the wordlist.

    """
    count			= len( wordlist )
    if count != BIP39_WORDLIST_COUNT:
        raise AssertionError( f"BIP-39 wordlist must contain exactly {BIP39_WORDLIST_COUNT} words, not {count}" )


@functools.lru_cache( maxsize=None )
def bip39_mnemonic( language: str ) -> Mnemonic:
    """One shared (read-only) python-mnemonic Mnemonic for each built-in BIP-39 language.  Its words
    are NFKD normalized, as Mnemonic.check normalizes the phrase; some built-in wordlists (eg.
    russian, turkish) are supplied in composed form, and would otherwise never match.

    """
    m				= Mnemonic( language )
    m.wordlist			= [ Mnemonic.normalize_string( w ) for w in m.wordlist ]
    return m


def wordlist_mnemonic( wordlist: Sequence[str] ) -> Mnemonic:
    """A python-mnemonic Mnemonic using exactly the supplied BIP-39 wordlist, for encoding entropy into
    (and validating) paper keys in the caller's locale.  The words are normalized the same way
    python-mnemonic normalizes phrases (NFKD), so that validation compares like with like.

    """
    validate_wordlist( wordlist )
    m				= Mnemonic( PHRASE_LANGUAGE_DEFAULT )
    m.wordlist			= [ Mnemonic.normalize_string( w ) for w in wordlist ]
    return m


def normalize_phrase( phrase: str ) -> str:
    """Polish up a (probably user-supplied) phrase by eliminating excess whitespace and down-casing;
    python-mnemonic is fragile, and requires exactly one space between words.

    """
    return ' '.join( w.lower() for w in phrase.strip().split() )


def produce_phrase(
    wordlist: Sequence[str],
    entropy: Optional[bytes]	= None,
    strength: Optional[int]	= None,
) -> str:
    """Produce a BIP-39 paper key from the provided entropy (or generated; default 128 bits, a
    12-word phrase), using exactly the supplied wordlist.

    We ensure we always use the same secure entropy source from shamir_mnemonic, to allow the user
    to monkey-patch it in one place for testing or to improve the entropy generation.

    """
    m				= wordlist_mnemonic( wordlist )
    if not entropy:
        if not strength:
            strength		= BITS_DEFAULT
        if strength not in BITS_BIP39:
            raise ValueError( f"BIP-39 entropy of {strength} bits not supported; specify {commas( BITS_BIP39, final='or' )}" )
        entropy			= shamir_mnemonic.shamir.RANDOM_BYTES( strength // 8 )
    phrase			= m.to_mnemonic( entropy )
    log.info( f"Produced {len( phrase.split() )}-word BIP-39 paper key from {len( entropy ) * 8}-bit entropy" )
    return phrase


def phrase_language(
    phrase: str,
    wordlist: Optional[Sequence[str]] = None,
) -> Optional[Mnemonic]:
    """Find the Mnemonic (for the supplied wordlist, or one of python-mnemonic's built-in languages)
    for which the normalized phrase is valid: every word is recognized and the BIP-39 check bits
    match.  Returns None if no such wordlist is found.

    """
    if wordlist is not None:
        candidates		= [ wordlist_mnemonic( wordlist ) ]
    else:
        candidates		= ( bip39_mnemonic( language ) for language in Mnemonic.list_languages() )
    for m in candidates:
        if m.check( phrase ):
            return m
    return None


def recover_seed(
    phrase: str,
    wordlist: Optional[Sequence[str]] = None,
) -> Optional[bytes]:
    """Recover the 512-bit BIP-39 seed from a single BIP-39 paper key, or None if the phrase is not a
    valid BIP-39 phrase (unrecognized words, wrong word count or failed check bits).

    No BIP-39 passphrase is supported; a paper key alone must regenerate the Account.

    """
    if not isinstance( phrase, str ):
        log.info( f"BIP-39 paper key must be a str, not a {type( phrase ).__name__}" )
        return None
    phrase_stripped		= normalize_phrase( phrase )
    if phrase_stripped != phrase:
        log.debug( "BIP-39 paper key stripped of unnecessary whitespace" )
    m				= phrase_language( phrase_stripped, wordlist=wordlist )
    if m is None:
        log.info( f"BIP-39 paper key of {len( phrase_stripped.split() )} words is invalid" )
        return None
    # Only a fully validated BIP-39 phrase must ever be used here!  No checking is done by
    # Mnemonic.to_seed of either the phrase or passphrase (except UTF-8 encoding).
    seed			= Mnemonic.to_seed( phrase_stripped, passphrase="" )
    log.debug( f"Recovered {len( seed ) * 8}-bit BIP-39 seed from {m.language if wordlist is None else 'supplied'} paper key" )
    return bytes( seed )  # bytearray --> bytes
