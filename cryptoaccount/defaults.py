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

__author__                      = "Perry Kundert"
__email__                       = "perry@dominionrnd.com"
__copyright__                   = "Copyright (c) 2022 Dominion Research & Development Corp."
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"

#
# BIP-39 Paper Keys
#
#     Every locale-specific BIP-39 wordlist contains exactly 2048 words; each word encodes 11 bits.
# A 128-bit entropy yields a 12-word phrase (128 bits + 4 checksum bits).
#
BIP39_WORDLIST_COUNT		= 2048
BITS_DEFAULT			= 128
BITS_BIP39			= (128, 160, 192, 224, 256)
PHRASE_LANGUAGE_DEFAULT		= "english"

#
# HD Wallet Derivation Paths of the public key material held by an Account
#
#     BTC holds a BIP-32 "master public key" (parent fingerprint, chain code and public key) at
# m/0', from which the wallet's BIP-32 receive and change addresses are derived.  ETH and XRP each
# hold a single public key, at their standard BIP-44 paths.
#
ACCOUNT_PATHS			= dict(
    BTC		= "m/0'",
    ETH		= "m/44'/60'/0'/0/0",
    XRP		= "m/44'/144'/0'/0/0",
)

# Sizes (in bytes) of each crypto's serialized public key material
ACCOUNT_KEY_SIZES		= dict(
    BTC		= 4 + 32 + 33,	# fingerprint, chain code, compressed public key
    ETH		= 65,		# uncompressed public key
    XRP		= 33,		# compressed public key
)

#
# Account Serialization Format Versions
#
#     Each time a blockchain is added, its public key must be serialized, and the version is
# incremented.  Older serializations lack the new public key, so they are rejected; the Account must
# then be re-created from its paper key.
#
SERIALIZE_VERSIONS		= {
    1:	('BTC', 'ETH'),
    2:	('BTC', 'ETH', 'XRP'),
}
SERIALIZE_VERSION		= 2

# Timestamps are serialized as unsigned 64-bit seconds since the epoch, but must also be presentable
# as a datetime; the latest is 9999-12-31 23:59:59 UTC
TIMESTAMP_MAX			= 253402300799
