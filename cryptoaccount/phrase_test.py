import logging
import unicodedata
import pytest

import shamir_mnemonic

from mnemonic		import Mnemonic

from .phrase		import validate_wordlist, produce_phrase, recover_seed, normalize_phrase, phrase_language
from .dependency_test	import (
    substitute, nonrandom_bytes, WORDLIST_ENGLISH, BIP39_ABANDON, BIP39_ZOO, BIP39_LEGAL, SEED_ABANDON_HEX,
)

log				= logging.getLogger( __package__ )


def test_validate_wordlist():
    validate_wordlist( WORDLIST_ENGLISH )
    validate_wordlist( tuple( WORDLIST_ENGLISH ))
    for bad in ( [], WORDLIST_ENGLISH[:-1], WORDLIST_ENGLISH + [ 'extra' ], WORDLIST_ENGLISH[:1024] ):
        with pytest.raises( AssertionError ) as excinfo:
            validate_wordlist( bad )
        assert f"not {len( bad )}" in str( excinfo.value )


def test_produce_phrase():
    assert produce_phrase( WORDLIST_ENGLISH, entropy=b'\0' * 16 ) == BIP39_ABANDON
    assert produce_phrase( WORDLIST_ENGLISH, entropy=b'\xff' * 16 ) == BIP39_ZOO
    assert produce_phrase( WORDLIST_ENGLISH, entropy=b'\x7f' * 16 ) == BIP39_LEGAL
    assert produce_phrase( WORDLIST_ENGLISH, entropy=b'\0' * 32 ) == ' '.join( [ 'abandon' ] * 23 + [ 'art' ] )

    with substitute( shamir_mnemonic.shamir, 'RANDOM_BYTES', nonrandom_bytes ):
        assert produce_phrase( WORDLIST_ENGLISH ) == BIP39_ABANDON
        assert len( produce_phrase( WORDLIST_ENGLISH, strength=256 ).split() ) == 24

    phrase			= produce_phrase( WORDLIST_ENGLISH )
    assert len( phrase.split() ) == 12
    assert all( w in WORDLIST_ENGLISH for w in phrase.split() )

    with pytest.raises( ValueError ):
        produce_phrase( WORDLIST_ENGLISH, strength=100 )
    with pytest.raises( AssertionError ):
        produce_phrase( WORDLIST_ENGLISH[:-1] )


def test_produce_phrase_wordlist():
    """Paper keys are produced using exactly the caller's wordlist, and validate against it."""
    reversed_words		= list( reversed( WORDLIST_ENGLISH ))
    phrase			= produce_phrase( reversed_words, entropy=b'\0' * 16 )
    assert phrase.split()[:11] == [ 'zoo' ] * 11
    assert phrase.split()[11] == reversed_words[3]
    assert recover_seed( phrase, wordlist=reversed_words ) is not None
    assert recover_seed( BIP39_ABANDON, wordlist=reversed_words ) is None
    assert phrase_language( phrase, wordlist=reversed_words ) is not None


def test_normalize_phrase():
    assert normalize_phrase( "  Abandon   ABANDON\tabandon\n" ) == "abandon abandon abandon"
    assert normalize_phrase( BIP39_ABANDON ) == BIP39_ABANDON


def test_recover_seed():
    assert recover_seed( BIP39_ABANDON ).hex() == SEED_ABANDON_HEX
    assert recover_seed( BIP39_ABANDON, wordlist=WORDLIST_ENGLISH ).hex() == SEED_ABANDON_HEX
    assert recover_seed( "\n  " + BIP39_ABANDON.upper().replace( ' ', '  ' ) + " \n" ).hex() == SEED_ABANDON_HEX
    assert phrase_language( BIP39_ABANDON ).language == "english"

    # Invalid words, word counts, and check bits
    assert recover_seed( "not a valid phrase" ) is None
    assert recover_seed( "" ) is None
    assert recover_seed( ' '.join( [ 'abandon' ] * 12 )) is None
    assert recover_seed( BIP39_ABANDON.rsplit( ' ', 1 )[0] ) is None
    assert recover_seed( BIP39_ABANDON + " about" ) is None
    assert recover_seed( BIP39_ABANDON.replace( "about", "abou" )) is None
    assert recover_seed( None ) is None
    assert recover_seed( BIP39_ABANDON.encode( 'UTF-8' )) is None


def test_recover_seed_languages():
    """Every built-in language's phrases are recognized, whether presented decomposed (as produced) or
    composed (as typically typed), eg. russian and turkish words w/ combining characters."""
    for language in Mnemonic.list_languages():
        words			= Mnemonic( language ).wordlist
        phrase			= produce_phrase( words, entropy=b'\x7f' * 16 )
        assert phrase_language( phrase ) is not None, f"{language} phrase not recognized"
        seed			= recover_seed( phrase )
        assert seed is not None and len( seed ) == 64
        assert recover_seed( unicodedata.normalize( 'NFC', phrase )) == seed
        assert recover_seed( phrase, wordlist=words ) == seed


def test_recover_seed_secrecy( caplog ):
    """Paper keys and their words must never be logged."""
    invalid			= BIP39_LEGAL.replace( "yellow", "winner" )
    with caplog.at_level( logging.DEBUG ):
        assert recover_seed( BIP39_LEGAL ) is not None
        assert recover_seed( invalid ) is None
        assert recover_seed( "  " + BIP39_LEGAL ) is not None
        produce_phrase( WORDLIST_ENGLISH, entropy=b'\x7f' * 16 )
    assert caplog.records
    for word in set( BIP39_LEGAL.split() ):
        assert word not in caplog.text
