"""
# Explicit conversions between the points of distinct clocks.

# Each function maps a point of one clock onto another using a fixed offset or a
# leap second table. Conversions are pairwise with &..libclock.Utc as the pivot;
# there is no automatic chaining, so a conversion from TAI to GPS is written
# with two calls:

#!python
	gps = conversions.gps_from_utc(conversions.utc_from_tai(tai))

# Results are points whose duration is the common type of the input's duration
# and &..types.Seconds. Conversions into &..libclock.File produce points of the
# file clock's own duration.

# [ Elements ]
# /tai_utc_offset/
	# Duration between the TAI and UTC epochs including the ten second
	# difference in effect when leap second accounting began in 1972.
# /gps_utc_offset/
	# Duration between the UTC and GPS epochs including the nine leap
	# seconds inserted before 1980-01-06.
# /file_system_offset/
	# Duration between the file clock epoch, 1601-01-01, and 1970-01-01
	# in ticks of &..libclock.File.duration.
"""
from . import earth
from . import types
from . import leaps
from . import errors
from . import libunit
from . import libpoint
from . import libclock
from . import gregorian
from . import views
from . import abstract

tai_utc_offset = types.Seconds(-gregorian.days_from_civil(1958, 1, 1) * earth.seconds_in_day + 10)
gps_utc_offset = types.Seconds(gregorian.days_from_civil(1980, 1, 6) * earth.seconds_in_day + 9)
file_system_offset = libunit.convert(
	libclock.File.duration,
	types.Seconds(-gregorian.days_from_civil(1601, 1, 1) * earth.seconds_in_day),
)

def _require(clock, point):
	if not isinstance(point, libpoint.TimePoint):
		raise TypeError(f"expected a {clock.__name__} time point, not {type(point).__name__}")
	if point.clock is not clock:
		raise errors.ClockMismatch(clock, point.clock)
	return point.since_epoch()

def _point(clock, duration):
	return libpoint.point_type(clock, type(duration))._from(duration)

def utc_from_system(point, table=None):
	"""
	# Convert a &libclock.System point into a &libclock.Utc point by adding
	# the leap seconds inserted at or before the point.

	# [ Parameters ]
	# /point/
		# The system clock point.
	# /table/
		# The &leaps.Table to use. Defaults to &leaps.table.
	"""
	d = _require(libclock.System, point)
	if table is None:
		table = leaps.table()

	n = table.count(libunit.exact(d))
	return _point(libclock.Utc, d + types.Seconds(n))

def system_from_utc(point, table=None):
	"""
	# Convert a &libclock.Utc point into a &libclock.System point by removing
	# the completed leap seconds.

	# Points inside an inserted leap second have no system clock counterpart and
	# map to the last representable point before the insertion.
	"""
	d = _require(libclock.Utc, point)
	if table is None:
		table = leaps.table()

	n, inside = table.utc_count(libunit.exact(d))
	r = d - types.Seconds(n)
	if inside:
		R = type(r)
		r = libunit.convert(R, types.Seconds(table.insertions[n])) - R(1)
	return _point(libclock.System, r)

def leap_second_info(point, table=None):
	"""
	# Identify whether the &libclock.Utc &point is inside an inserted leap second
	# and the number of leap seconds inserted before it.

	# Returns a pair: `(is_leap_second, elapsed)` where `elapsed` is
	# a &types.Seconds instance including the current leap second.
	"""
	d = _require(libclock.Utc, point)
	if table is None:
		table = leaps.table()

	n, inside = table.utc_count(libunit.exact(d))
	return (inside, types.Seconds(n + 1 if inside else n))

def tai_from_utc(point):
	"""
	# Convert a &libclock.Utc point into a &libclock.Tai point.
	"""
	return _point(libclock.Tai, _require(libclock.Utc, point) + tai_utc_offset)

def utc_from_tai(point):
	"""
	# Convert a &libclock.Tai point into a &libclock.Utc point.
	"""
	return _point(libclock.Utc, _require(libclock.Tai, point) - tai_utc_offset)

def gps_from_utc(point):
	"""
	# Convert a &libclock.Utc point into a &libclock.Gps point.
	"""
	return _point(libclock.Gps, _require(libclock.Utc, point) - gps_utc_offset)

def utc_from_gps(point):
	"""
	# Convert a &libclock.Gps point into a &libclock.Utc point.
	"""
	return _point(libclock.Utc, _require(libclock.Gps, point) + gps_utc_offset)

def file_from_system(point):
	"""
	# Convert a &libclock.System point into a &libclock.File point.

	# The result is a &libclock.File.time_point; finer system points are floored
	# to the file clock's 100 nanosecond tick.
	"""
	d = libunit.floor(libclock.File.duration, _require(libclock.System, point))
	return libclock.File.time_point._from(d + file_system_offset)

def system_from_file(point):
	"""
	# Convert a &libclock.File point into a &libclock.System point.
	"""
	return _point(libclock.System, _require(libclock.File, point) - file_system_offset)

def file_from_utc(point, table=None):
	"""
	# Convert a &libclock.Utc point into a &libclock.File point.

	# File time does not count leap seconds; the table is used to remove them.
	"""
	return file_from_system(system_from_utc(point, table))

def utc_from_file(point, table=None):
	"""
	# Convert a &libclock.File point into a &libclock.Utc point.
	"""
	return utc_from_system(system_from_file(point), table)

def _zone(zone):
	if zone is None:
		return views.system
	if not isinstance(zone, abstract.Zone):
		raise TypeError(f"zone must provide an offset method, not {type(zone).__name__}")
	return zone

def local_from_system(point, zone=None):
	"""
	# Reinterpret a &libclock.System point as a &libclock.Local point using the offset
	# that &zone reports for it.

	# [ Parameters ]
	# /zone/
		# The &abstract.Zone. Defaults to &views.system.
	"""
	d = _require(libclock.System, point)
	return _point(libclock.Local, d + _zone(zone).offset(point))

def system_from_local(point, zone=None):
	"""
	# Convert a &libclock.Local point back into a &libclock.System point.

	# The offset is resolved in two steps: first for the local reading taken as
	# a system point, then for the system point that the first offset produces.
	# Local times that are repeated or skipped by a zone transition resolve to
	# the offset reported by the second step.
	"""
	d = _require(libclock.Local, point)
	zone = _zone(zone)

	guess = d - zone.offset(_point(libclock.System, d))
	r = d - zone.offset(_point(libclock.System, guess))
	return _point(libclock.System, r)
