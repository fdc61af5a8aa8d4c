import contextlib

import shamir_mnemonic

from mnemonic		import Mnemonic

BIP39_ABANDON			= "abandon abandon abandon abandon abandon abandon abandon abandon abandon abandon abandon about"
BIP39_ZOO			= "zoo zoo zoo zoo zoo zoo zoo zoo zoo zoo zoo wrong"
BIP39_LEGAL			= "legal winner thank year wave sausage worth useful legal winner thank yellow"

# The 512-bit BIP-39 seed of BIP39_ABANDON (no passphrase), its BIP-32 master key fingerprint, and
# its standard m/44'/60'/0'/0/0 Ethereum address
SEED_ABANDON_HEX		= "5eb00bbddcf069084889a8ab9155568165f5c453ccb85e70811aaed6f6da5fc19a5ac40b389cd370d086206dec8aa6c43daea6690f20ad3d8d48b2d2ce9e38e4"
FINGERPRINT_ABANDON_HEX		= "73c5da0a"
ADDRESS_ETH_ABANDON		= "0x9858EfFD232B4033E47d90003D41EC34EcaEda94"

WORDLIST_ENGLISH		= list( Mnemonic( "english" ).wordlist )


class substitute( contextlib.ContextDecorator ):
    """Generated paper keys include random data.  Replace the random function during testing to
    get determinism in resultant mnemonics.

    """
    def __init__( self, thing, attribute, value ):
        self.thing		= thing
        self.attribute		= attribute
        self.value		= value
        self.saved		= None

    def __enter__( self ):
        self.saved		= getattr( self.thing, self.attribute )
        setattr( self.thing, self.attribute, self.value )

    def __exit__( self, *exc ):
        setattr( self.thing, self.attribute, self.saved )


def nonrandom_bytes( n ):
    return b'\0' * n


def test_substitute():
    saved			= shamir_mnemonic.shamir.RANDOM_BYTES
    with substitute( shamir_mnemonic.shamir, 'RANDOM_BYTES', nonrandom_bytes ):
        assert shamir_mnemonic.shamir.RANDOM_BYTES( 4 ) == b'\0\0\0\0'
    assert shamir_mnemonic.shamir.RANDOM_BYTES is saved
    assert len( WORDLIST_ENGLISH ) == 2048
