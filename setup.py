import os

from setuptools import setup

# 
# All platforms
# 
HERE				= os.path.dirname( os.path.abspath( __file__ ))


def requirements( name ):
    """Remove whitespace, elide blank lines and comments"""
    return list(
        ''.join( r.split() )
        for r in open( os.path.join( HERE, name )).readlines()
        if r.strip() and not r.strip().startswith( '#' )
    )


install_requires		= requirements( "requirements.txt" )
tests_require			= requirements( "requirements-tests.txt" )

# Since setuptools is retiring tests_require, add it as an option
extras_require			= {
    'tests':			tests_require,
}

# Must work if setup.py is run in the source distribution context, or from
# within the packaged distribution directory.
__version__			= None
try:
    exec( open( os.path.join( HERE, 'cryptoaccount/version.py' ), 'r' ).read() )
except FileNotFoundError:
    exec( open( os.path.join( HERE, 'version.py' ), 'r' ).read() )

package_dir			= {
    "cryptoaccount":		"./cryptoaccount",
}

long_description_content_type	= 'text/markdown'
long_description		= """\
A multi-currency wallet's Account is the root identity from which each
blockchain's wallet is derived.  It is created once from a BIP-39 "paper
key" and the time at which the Account's validity begins, and is then
stored as a compact, versioned binary serialization holding only public
key material.

    >>> from cryptoaccount import Account
    >>> phrase, timestamp = Account.generate_phrase( wordlist )
    >>> account = Account.create_from_phrase( phrase, timestamp, uids="wallet-1" )
    >>> blob = account.serialize
    >>> restored = Account.create_from_serialization( blob, uids="wallet-1" )

An invalid paper key or serialization produces None.  A serialization is
always produced in the current format version; when a new blockchain is
added, the format version changes, prior serializations are no longer
accepted, and the Account *must* be re-created from its paper key.  Never
discard the paper key!

The wordlist supplied to Account.generate_phrase must be a locale-specific
BIP-39 wordlist of exactly 2048 words; any other size raises an
AssertionError.
"""

classifiers			= [
    "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
    "License :: Other/Proprietary License",
    "Programming Language :: Python :: 3",
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Topic :: Security :: Cryptography",
    "Topic :: Office/Business :: Financial",
]

setup(
    name			= "cryptoaccount",
    version			= __version__,
    install_requires		= install_requires,
    tests_require		= tests_require,
    extras_require		= extras_require,
    packages			= list( package_dir.keys() ),
    package_dir			= package_dir,
    include_package_data	= True,
    zip_safe			= True,
    author			= "Perry Kundert",
    author_email		= "perry@dominionrnd.com",
    description			= "Multi-currency wallet Account identity derivation from BIP-39 paper keys, and versioned serialization",
    long_description		= long_description,
    long_description_content_type = long_description_content_type,
    license			= "Dual License; GPLv3 and Proprietary",
    keywords			= "Ethereum Bitcoin Ripple cryptocurrency BIP-39 BIP-32 paper key wallet account serialization",
    classifiers			= classifiers,
    python_requires		= ">=3.9",
)
