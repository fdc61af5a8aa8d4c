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
import math

from datetime		import datetime, timezone
from typing		import Union

from .defaults		import TIMESTAMP_MAX

__author__                      = "Perry Kundert"
__email__                       = "perry@dominionrnd.com"
__copyright__                   = "Copyright (c) 2022 Dominion Research & Development Corp."
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"

log				= logging.getLogger( "util" )


def commas( seq, final=None ):  # supply alternative final connector, eg. 'and', 'or'
    """Join a sequence w/ commas, optionally w/ an alternative final connector, eg. 'and', 'or'."""
    seq				= list( seq )
    if final and len(seq) > 1:
        seq			= seq[:-2] + [f"{seq[-2]} {final} {seq[-1]}"]
    return ', '.join( map( str, seq ))


#
# util.into_seconds, util.from_seconds	-- Account timestamps
#
#     An Account's timestamp has whole-second resolution, and no timezone semantics; we always
# present it as a UTC datetime.  Naive datetimes are interpreted in local time, as datetime.timestamp
# does.
#
def into_seconds( timestamp: Union[datetime,int,float] ) -> int:
    """Truncate the supplied datetime or numeric seconds since the epoch into whole seconds,
    confirming that it lies within 0 to TIMESTAMP_MAX (the end of year 9999, UTC).

    """
    if isinstance( timestamp, datetime ):
        timestamp		= timestamp.timestamp()
    if isinstance( timestamp, bool ) or not isinstance( timestamp, (int,float) ):
        raise ValueError( f"Timestamp must be a datetime or numeric seconds, not {type( timestamp ).__name__}" )
    if isinstance( timestamp, float ) and not math.isfinite( timestamp ):
        raise ValueError( f"Timestamp {timestamp} seconds is not a finite number" )
    seconds			= int( timestamp )
    if not 0 <= seconds <= TIMESTAMP_MAX:
        raise ValueError( f"Timestamp {seconds} seconds is outside the range 0 to {TIMESTAMP_MAX}" )
    return seconds


def from_seconds( seconds: int ) -> datetime:
    """Present whole seconds since the epoch as a UTC datetime."""
    return datetime.fromtimestamp( seconds, tz=timezone.utc )


def now_seconds() -> int:
    """The current wall-clock time, in whole seconds since the epoch."""
    return into_seconds( datetime.now( tz=timezone.utc ))
