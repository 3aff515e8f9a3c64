"""
# Clock classes.

# Clocks are tag classes; they are not instantiated. Each clock designates a
# &libunit.Duration class, `duration`, and a &libpoint.TimePoint class,
# `time_point`, and reads the current point using `now`.

#!python
	start = Steady.now()
	elapsed = Steady.now() - start

	wall = System.now()
	assert Utc.now().clock is Utc

# There is no default clock. Monotonic measurements must use &Steady and wall
# clock time must use &System (also available as &Realtime).

# [ Elements ]
# /Realtime/
	# Alias of &System.
"""
from . import ratio
from . import types # Standard names for the derived duration classes.
from . import libunit
from . import libpoint
from . import abstract
from . import sysclock

class Clock(object):
	"""
	# Base class of clock tags.

	# Subclasses declare their &representation, &period, and &is_steady; the
	# `duration` and `time_point` classes are derived when the subclass is created.

	# [ Properties ]
	# /representation/
		# The &libunit.Representation of the clock's ticks.
	# /period/
		# The &ratio.Period of the clock's ticks.
	# /is_steady/
		# Whether successive readings are non-decreasing and the tick rate is constant.
	# /epoch/
		# Description of the point that the clock's durations are measured from.
	"""

	representation = libunit.int64
	period = ratio.nano
	is_steady = False
	epoch = None

	duration = None
	time_point = None

	def __init_subclass__(Class, **kw):
		super().__init_subclass__(**kw)
		Class.duration = libunit.duration_type(Class.representation, Class.period)
		Class.time_point = libpoint.point_type(Class, Class.duration)

	def __new__(Class, *args, **kw):
		raise TypeError("clocks are not instantiated; use the class directly")

	@classmethod
	def now(Class):
		raise NotImplementedError(f"{Class.__name__} does not have a source")
abstract.Clock.register(Clock)

class Steady(Clock):
	"""
	# The system's monotonic clock.

	# Readings never decrease, even across adjustments to the real clock.
	"""
	is_steady = True
	epoch = 'unspecified; usually system boot'

	@classmethod
	def now(Class):
		return Class.time_point._from(Class.duration(sysclock.monotonic()))

class System(Clock):
	"""
	# The system's real clock; wall time measured since 1970-01-01 without leap seconds.
	"""
	epoch = '1970-01-01T00:00:00 UTC'

	@classmethod
	def now(Class):
		return Class.time_point._from(Class.duration(sysclock.real()))

Realtime = System

class Utc(Clock):
	"""
	# Coordinated Universal Time measured since 1970-01-01 including inserted leap seconds.
	"""
	epoch = '1970-01-01T00:00:00 UTC'

	@classmethod
	def now(Class):
		from . import conversions
		return conversions.utc_from_system(System.now())

class Tai(Clock):
	"""
	# International Atomic Time measured since 1958-01-01.
	"""
	epoch = '1958-01-01T00:00:00 TAI'

	@classmethod
	def now(Class):
		from . import conversions
		return conversions.tai_from_utc(Utc.now())

class Gps(Clock):
	"""
	# Global Positioning System time measured since 1980-01-06.
	"""
	epoch = '1980-01-06T00:00:00 UTC'

	@classmethod
	def now(Class):
		from . import conversions
		return conversions.gps_from_utc(Utc.now())

class File(Clock):
	"""
	# File system timestamps; 100 nanosecond ticks since 1601-01-01.
	"""
	period = ratio.Period(1, 10**7)
	epoch = '1601-01-01T00:00:00 UTC'

	@classmethod
	def now(Class):
		from . import conversions
		return conversions.file_from_system(System.now())

class Local(Clock):
	"""
	# Local time; &System time adjusted by the offset of a zone.

	# &Local does not have a source or an epoch of its own. Its points are
	# system points reinterpreted using a caller supplied &abstract.Zone.
	"""
	epoch = '1970-01-01T00:00:00 in the zone of the point'

	@classmethod
	def now(Class, zone=None):
		"""
		# The current local time in &zone.

		# [ Parameters ]
		# /zone/
			# The &abstract.Zone providing the offset.
			# Defaults to &.views.system, the zone configured by the operating system.
		"""
		from . import conversions
		return conversions.local_from_system(System.now(), zone)

#: The clocks with a source.
Clocks = (Steady, System, Utc, Tai, Gps, File, Local)
