"""
# Protocols for durations, points in time, clocks, and zones.

# Primarily, this module exists to document the interfaces of &Measure, &Point,
# &Clock, and &Zone.
"""
from abc import abstractmethod
import typing

@typing.runtime_checkable
class Measure(typing.Protocol):
	"""
	# A quantity of time: a tick count paired with a representation and a period.
	"""

	@property
	@abstractmethod
	def representation(self):
		"""
		# The storage type of the tick count.
		"""

	@property
	@abstractmethod
	def period(self):
		"""
		# The number of seconds in a single tick; a reduced positive fraction.
		"""

	@abstractmethod
	def count(self):
		"""
		# The raw tick count without any conversion.
		"""

	@abstractmethod
	def select(self, unit):
		"""
		# The number of complete &unit contained by the measure, truncated toward zero.

		#!python
			h = x.select('hour')
			m = x.select('minute')
		"""

@typing.runtime_checkable
class Point(typing.Protocol):
	"""
	# A point in time; a measure since the epoch of a clock.
	"""

	@property
	@abstractmethod
	def clock(self):
		"""
		# The clock whose epoch the point is relative to.

		# Points of distinct clocks cannot be compared or subtracted.
		"""

	@property
	@abstractmethod
	def duration(self):
		"""
		# The &Measure class of &since_epoch.
		"""

	@abstractmethod
	def since_epoch(self):
		"""
		# The &Measure between the clock's epoch and the point.

		# [ Invariants ]
		#!python
			assert point - point.clock.time_point() == point.since_epoch()
		"""

@typing.runtime_checkable
class Clock(typing.Protocol):
	"""
	# A source of points in time.
	"""

	@property
	@abstractmethod
	def is_steady(self) -> bool:
		"""
		# Whether the clock never runs backwards and ticks at a constant rate.

		# [ Invariants ]
		#!python
			a = clock.now()
			b = clock.now()
			assert not clock.is_steady or a <= b
		"""

	@abstractmethod
	def now(self):
		"""
		# Read the clock's source and return the current &Point.

		# Safe to call concurrently from any number of threads.
		"""

@typing.runtime_checkable
class Zone(typing.Protocol):
	"""
	# A source of UTC offsets.

	# Time zone databases are not provided by this package; any object
	# providing &offset can be used to produce local time.
	"""

	@abstractmethod
	def offset(self, point):
		"""
		# The &Measure to add to the system clock &point in order to produce local time.
		"""
