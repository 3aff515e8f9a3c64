"""
# Leap second tables.

# A &Table lists the instants, in seconds of the &..libclock.System clock, at which
# a positive leap second had been inserted; the first second of the day following
# the insertion. The table is consumed by the &..conversions between the UTC and
# system clocks.

# &table returns the process' table. It is read from the `leap-seconds.list` file
# distributed with the time zone database, or from the file identified by the
# `HOROLOGY_LEAPSECONDS` environment variable. When no file can be read, the
# &builtin table is used.

# [ Elements ]
# /path/
	# Default location of the `leap-seconds.list` file.
# /environ/
	# Name of the environment variable overriding &path.
# /ntp_delta/
	# Seconds between the NTP epoch, 1900-01-01, and 1970-01-01.
# /builtin/
	# &Table of the leap seconds inserted from 1972 through 2016.
"""
import os
import bisect
import functools

from . import gregorian
from . import earth

path = '/usr/share/zoneinfo/leap-seconds.list'
environ = 'HOROLOGY_LEAPSECONDS'
ntp_delta = -gregorian.days_from_civil(1900, 1, 1) * earth.seconds_in_day

class Table(object):
	"""
	# Sorted sequence of leap second insertions.

	# [ Properties ]
	# /insertions/
		# Tuple of system clock seconds at which each leap second had been inserted.
	# /expires/
		# System clock seconds after which the table is no longer authoritative,
		# or &None when unknown.
	"""
	__slots__ = ('insertions', 'expires', '_utc')

	def __init__(self, insertions, expires=None):
		self.insertions = tuple(sorted(insertions))
		self.expires = expires
		# UTC clock seconds at which each leap second has completed.
		self._utc = tuple(s + i + 1 for i, s in enumerate(self.insertions))

	def __len__(self):
		return len(self.insertions)

	def __iter__(self):
		return iter(self.insertions)

	def __repr__(self):
		return f"<{self.__class__.__name__}[{len(self.insertions)}] expires={self.expires!r}>"

	def __eq__(self, operand):
		if not isinstance(operand, Table):
			return NotImplemented
		return self.insertions == operand.insertions

	def __hash__(self):
		return hash(self.insertions)

	def expired(self, seconds) -> bool:
		"""
		# Whether the system clock &seconds is at or beyond the table's expiration.

		# Tables without a known expiration, such as &builtin, are never reported
		# as expired; leap seconds announced after their creation are absent.
		"""
		return self.expires is not None and seconds >= self.expires

	def count(self, seconds) -> int:
		"""
		# The number of leap seconds inserted at or before the system clock &seconds.
		"""
		return bisect.bisect_right(self.insertions, seconds)

	def utc_count(self, seconds):
		"""
		# Identify the leap seconds completed at the UTC clock &seconds.

		# Returns a pair: the number of completed leap seconds and whether
		# &seconds falls inside the following leap second.
		"""
		n = bisect.bisect_right(self._utc, seconds)
		if n < len(self.insertions):
			inside = seconds >= self._utc[n] - 1
		else:
			inside = False
		return n, inside

def parse(lines) -> Table:
	"""
	# Construct a &Table from the lines of a `leap-seconds.list` file.

	# Data lines are `<NTP seconds> <TAI-UTC>` pairs; comments begin with `#`.
	# The expiration is read from the `#@` line.

	# [ Exceptions ]
	# /&ValueError/
		# A data line is malformed or the TAI-UTC difference does not
		# increase by a single second.
	"""
	entries = []
	expires = None

	for line in lines:
		if line.startswith('#@'):
			expires = int(line[2:].split()[0]) - ntp_delta
			continue

		data = line.split('#', 1)[0].split()
		if not data:
			continue
		if len(data) != 2:
			raise ValueError(f"malformed leap second entry: {line!r}")

		entries.append((int(data[0]) - ntp_delta, int(data[1])))

	insertions = []
	for (_, prior), (seconds, offset) in zip(entries, entries[1:]):
		if offset - prior != 1:
			raise ValueError(f"unsupported leap second adjustment: {prior} to {offset}")
		insertions.append(seconds)

	return Table(insertions, expires)

def load(filepath=None) -> Table:
	"""
	# Read and parse the leap second table at &filepath.

	# [ Parameters ]
	# /filepath/
		# The file to read. Defaults to the value of the &environ variable, or &path.
	"""
	if filepath is None:
		filepath = os.environ.get(environ) or path

	with open(filepath, encoding='ascii') as f:
		return parse(f)

def _builtin_dates():
	return [
		(1972, 7, 1), (1973, 1, 1), (1974, 1, 1), (1975, 1, 1),
		(1976, 1, 1), (1977, 1, 1), (1978, 1, 1), (1979, 1, 1),
		(1980, 1, 1), (1981, 7, 1), (1982, 7, 1), (1983, 7, 1),
		(1985, 7, 1), (1988, 1, 1), (1990, 1, 1), (1991, 1, 1),
		(1992, 7, 1), (1993, 7, 1), (1994, 7, 1), (1996, 1, 1),
		(1997, 7, 1), (1999, 1, 1), (2006, 1, 1), (2009, 1, 1),
		(2012, 7, 1), (2015, 7, 1), (2017, 1, 1),
	]

builtin = Table([
	gregorian.days_from_civil(*date) * earth.seconds_in_day
	for date in _builtin_dates()
])

@functools.lru_cache(1)
def table() -> Table:
	"""
	# The process' leap second table.

	# Loaded once; falls back to &builtin when the file is missing or malformed.
	# The &builtin table has no expiration and lists the insertions through
	# 2017-01-01 only; &Table.expires distinguishes a loaded table from it.
	"""
	try:
		return load()
	except (OSError, ValueError):
		return builtin
