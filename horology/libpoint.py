"""
# Points in time: a duration since the epoch of a clock.

# Point classes are created and cached by &point_type for each `(clock, duration)`
# pair. Points may only be ordered against or subtracted from points of the same
# clock, and points of distinct clocks are never equal; converting between
# clocks requires a function from &.conversions.

#!python
	from horology import libclock, types

	p = libclock.System.now()
	later = p + types.Minutes(5)
	assert later - p == types.Seconds(300)
"""
from . import errors
from . import abstract
from . import libunit

class TimePoint(object):
	"""
	# A &duration since the epoch of &clock.

	# Not instantiated directly; subclasses are created by &point_type and are
	# usually accessed using the `time_point` attribute of a clock.

	# [ Properties ]
	# /clock/
		# The clock class that the point is relative to.
	# /duration/
		# The &libunit.Duration class of &since_epoch.
	"""
	__slots__ = ('_since_epoch',)

	clock = None
	duration = None

	def __init__(self, since_epoch=None):
		if self.duration is None:
			raise TypeError("unspecialized time point; use point_type to construct a class")

		if since_epoch is None:
			since_epoch = self.duration.zero()
		elif not isinstance(since_epoch, libunit.Duration):
			raise TypeError(f"{type(self).__name__} requires a duration since the epoch")
		elif type(since_epoch) is not self.duration:
			since_epoch = libunit.convert(self.duration, since_epoch)

		self._since_epoch = since_epoch

	@classmethod
	def _from(Class, since_epoch):
		self = object.__new__(Class)
		self._since_epoch = since_epoch
		return self

	@classmethod
	def min(Class):
		"""
		# The earliest representable point.
		"""
		return Class._from(Class.duration.min())

	@classmethod
	def max(Class):
		"""
		# The latest representable point.
		"""
		return Class._from(Class.duration.max())

	def since_epoch(self):
		"""
		# The duration between the clock's epoch and the point.
		"""
		return self._since_epoch

	def _same_clock(self, operand):
		if not isinstance(operand, TimePoint):
			return False
		if operand.clock is not self.clock:
			raise errors.ClockMismatch(self.clock, operand.clock)
		return True

	def __repr__(self):
		return f"{type(self).__name__}({self._since_epoch!r})"

	def __hash__(self):
		return hash((self.clock, self._since_epoch))

	# Points of distinct clocks are unequal; ordering them raises &errors.ClockMismatch.
	def __eq__(self, operand):
		if not isinstance(operand, TimePoint) or operand.clock is not self.clock:
			return NotImplemented
		return self._since_epoch == operand._since_epoch

	def __ne__(self, operand):
		if not isinstance(operand, TimePoint) or operand.clock is not self.clock:
			return NotImplemented
		return self._since_epoch != operand._since_epoch

	def __lt__(self, operand):
		if not self._same_clock(operand):
			return NotImplemented
		return self._since_epoch < operand._since_epoch

	def __le__(self, operand):
		if not self._same_clock(operand):
			return NotImplemented
		return self._since_epoch <= operand._since_epoch

	def __gt__(self, operand):
		if not self._same_clock(operand):
			return NotImplemented
		return self._since_epoch > operand._since_epoch

	def __ge__(self, operand):
		if not self._same_clock(operand):
			return NotImplemented
		return self._since_epoch >= operand._since_epoch

	def __add__(self, operand):
		if not isinstance(operand, libunit.Duration):
			return NotImplemented
		d = self._since_epoch + operand
		return point_type(self.clock, type(d))._from(d)
	__radd__ = __add__

	def __sub__(self, operand):
		if isinstance(operand, libunit.Duration):
			d = self._since_epoch - operand
			return point_type(self.clock, type(d))._from(d)

		if self._same_clock(operand):
			return self._since_epoch - operand._since_epoch

		return NotImplemented
abstract.Point.register(TimePoint)

_types = {}

def point_type(clock, duration):
	"""
	# Retrieve the &TimePoint class measuring &duration since the epoch of &clock.

	# Classes are cached; the same arguments always return the same class.
	"""
	key = (clock, duration)
	Class = _types.get(key)
	if Class is None:
		Class = type(f"{clock.__name__}.TimePoint[{duration.__name__}]", (TimePoint,), {
			'__slots__': (),
			'clock': clock,
			'duration': duration,
		})
		Class = _types.setdefault(key, Class)
	return Class

def _convert(method, Target, point):
	if not isinstance(point, TimePoint):
		raise TypeError(f"expected a time point, not {type(point).__name__}")
	return point_type(point.clock, Target)._from(method(Target, point._since_epoch))

def cast(Target, point):
	"""
	# Convert the &point's duration into &Target using &libunit.cast.
	"""
	return _convert(libunit.cast, Target, point)

def floor(Target, point):
	"""
	# Convert the &point's duration into &Target using &libunit.floor.
	"""
	return _convert(libunit.floor, Target, point)

def ceil(Target, point):
	"""
	# Convert the &point's duration into &Target using &libunit.ceil.
	"""
	return _convert(libunit.ceil, Target, point)

def round(Target, point):
	"""
	# Convert the &point's duration into &Target using &libunit.round.
	"""
	return _convert(libunit.round, Target, point)
