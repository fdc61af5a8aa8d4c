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

from .version		import __version__			# noqa F401
from .account		import Account				# noqa F401
from .engine		import Identity				# noqa F401
from .phrase		import validate_wordlist		# noqa F401
from .defaults		import BIP39_WORDLIST_COUNT, SERIALIZE_VERSION	# noqa F401

__author__                      = "Perry Kundert"
__email__                       = "perry@dominionrnd.com"
__copyright__                   = "Copyright (c) 2022 Dominion Research & Development Corp."
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"
