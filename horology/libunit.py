"""
# Durations: tick counts stored by a fixed representation and scaled by a rational period.

# Each `(Representation, Period)` pair is a distinct class created and cached by
# &duration_type. Operations across two classes resolve a common type whose
# period is the greatest common divisor of the numerators over the least common
# multiple of the denominators, and whose representation is the wider of the two.

#!python
	Seconds = duration_type(int64, ratio.seconds)
	Minutes = duration_type(int64, ratio.Period(60))
	assert Minutes(1) + Seconds(30) == Seconds(90)
	assert type(Minutes(1) + Seconds(30)) is Seconds

# Arithmetic is exact. Values are rescaled using unbounded integers and then
# admitted into the result's representation; values outside the representation's
# range raise &errors.Overflow rather than wrapping.

# [ Elements ]
# /int8/
	# Eight bit signed representation.
# /int16/
	# Sixteen bit signed representation.
# /int32/
	# Thirty-two bit signed representation.
# /int64/
	# Sixty-four bit signed representation; the representation of the standard units.
# /float64/
	# Double precision floating point representation.
"""
import sys
import math
import numbers
import builtins
import fractions
import functools
import dataclasses

from . import ratio
from . import errors
from . import abstract

record = functools.partial(dataclasses.dataclass, slots=True, eq=True, frozen=True)

@record
class Representation(object):
	"""
	# The storage type of a duration's tick count.

	# [ Properties ]
	# /name/
		# The identifier of the representation.
	# /minimum/
		# The smallest storable tick count.
	# /maximum/
		# The largest storable tick count.
	# /floating/
		# Whether ticks are floating point values.
	# /bits/
		# The width of the storage. Used to select the wider of two representations.
	"""

	name: str
	minimum: object
	maximum: object
	floating: bool = False
	bits: int = 64

	def __str__(self):
		return self.name

	def admit(self, value, operation=None):
		"""
		# Convert the exact &value into a tick count of this representation.

		# Integer representations require &value to be an integer within
		# &minimum and &maximum. Floating representations round the value
		# to the nearest float; non-finite floats pass through unchanged.

		# [ Exceptions ]
		# /&errors.Overflow/
			# The value cannot be stored.
		"""
		if self.floating:
			if isinstance(value, float):
				return value
			try:
				return float(value)
			except OverflowError:
				raise errors.Overflow(value, self, operation) from None

		if value < self.minimum or value > self.maximum:
			raise errors.Overflow(value, self, operation)
		return int(value)

def integer(bits:int, name=None) -> Representation:
	"""
	# Construct the signed two's complement integer representation of &bits width.
	"""
	limit = 2 ** (bits - 1)
	return Representation(name or f"int{bits}", -limit, limit - 1, False, bits)

int8 = integer(8)
int16 = integer(16)
int32 = integer(32)
int64 = integer(64)
float64 = Representation('float64', -sys.float_info.max, sys.float_info.max, True, 64)

def common_representation(*representations) -> Representation:
	"""
	# Select the representation capable of holding the values of all the given
	# representations. Floating representations are preferred over integers.
	"""
	floats = [r for r in representations if r.floating]
	if floats:
		return builtins.max(floats, key=(lambda r: r.bits))
	return builtins.max(representations, key=(lambda r: r.bits))

def _number(value, Fraction=fractions.Fraction, isfinite=math.isfinite):
	# Exact form of a tick count or scalar. Non-finite floats cannot be fractions.
	if isinstance(value, float) and not isfinite(value):
		return value
	return Fraction(value)

def _truncate(n, d):
	# Integer division rounding toward zero.
	if d == 0:
		raise ZeroDivisionError("duration division by zero")
	q = builtins.abs(n) // builtins.abs(d)
	return q if (n < 0) == (d < 0) else -q

def exact(duration):
	"""
	# The exact number of seconds represented by &duration as a &fractions.Fraction.

	# Infinite or NaN floating point durations are returned as floats.
	"""
	n = _number(duration._ticks)
	if isinstance(n, float):
		return n
	return n * duration.period

class Duration(object):
	"""
	# A quantity of ticks of a fixed &period stored by a fixed &representation.

	# Not instantiated directly; subclasses are created by &duration_type.
	# The standard instantiations are available from &.types.

	# [ Properties ]
	# /representation/
		# The &Representation storing the tick count.
	# /period/
		# The &ratio.Period of a single tick in seconds.
	# /context/
		# The &Context resolving unit names for &of and &select.
	"""
	__slots__ = ('_ticks',)

	representation = None
	period = None
	context = None

	def __init__(self, ticks=0):
		rep = self.representation
		if rep is None:
			raise TypeError("unspecialized duration; use duration_type to construct a class")

		if isinstance(ticks, Duration):
			raise TypeError("durations must be converted using cast, floor, ceil, or round")

		if rep.floating:
			if not isinstance(ticks, numbers.Real):
				raise TypeError(f"{type(self).__name__} ticks must be real numbers")
			ticks = rep.admit(_number(ticks), 'construct')
		else:
			if not isinstance(ticks, numbers.Integral):
				raise TypeError(f"{type(self).__name__} ticks must be integers")
			ticks = rep.admit(int(ticks), 'construct')

		self._ticks = ticks

	@classmethod
	def _from(Class, ticks, operation=None):
		# Construct without type checks; &ticks is exact or a non-finite float.
		self = object.__new__(Class)
		self._ticks = Class.representation.admit(ticks, operation)
		return self

	@classmethod
	def zero(Class):
		"""
		# The duration of zero ticks.
		"""
		return Class._from(0)

	@classmethod
	def min(Class):
		"""
		# The duration with the smallest tick count the representation can store.
		"""
		return Class._from(Class.representation.minimum)

	@classmethod
	def max(Class):
		"""
		# The duration with the largest tick count the representation can store.
		"""
		return Class._from(Class.representation.maximum)

	@classmethod
	def of(Class, *durations, **parts):
		"""
		# Create an instance from the sum of the given &durations and the
		# unit quantities specified by &parts.

		#!python
			assert types.Seconds.of(hour=1, minute=30) == types.Minutes(90)
			assert types.Milliseconds.of(types.Seconds(1), millisecond=5).count() == 1005

		# The sum is computed exactly and truncated toward zero for integer representations.

		# [ Parameters ]
		# /durations/
			# &Duration instances of any type.
		# /parts/
			# Keyword names designate the unit of the corresponding value.
			# Units are resolved using &context.
		"""
		total = fractions.Fraction(0)
		for d in durations:
			if not isinstance(d, Duration):
				raise TypeError("positional arguments must be durations")
			s = exact(d)
			if isinstance(s, float):
				raise errors.Overflow(s, Class.representation, 'of')
			total += s

		for unit, quantity in parts.items():
			n = _number(quantity)
			if isinstance(n, float):
				raise errors.Overflow(n, Class.representation, 'of')
			total += n * Class.context.period(unit)

		q = total / Class.period
		if Class.representation.floating:
			return Class._from(q, 'of')
		return Class._from(math.trunc(q), 'of')

	def count(self):
		"""
		# The raw tick count.
		"""
		return self._ticks

	def select(self, unit:str) -> int:
		"""
		# The number of whole &unit contained by the duration, truncated toward zero.

		#!python
			assert types.Seconds(150).select('minute') == 2
		"""
		s = exact(self)
		if isinstance(s, float):
			raise errors.Overflow(s, int64, 'select')
		return math.trunc(s / self.context.period(unit))

	def __repr__(self):
		return f"{type(self).__name__}({self._ticks!r})"

	def __bool__(self):
		return self._ticks != 0

	def __hash__(self):
		return hash(exact(self))

	def __eq__(self, operand):
		if not isinstance(operand, Duration):
			return NotImplemented
		return exact(self) == exact(operand)

	def __ne__(self, operand):
		if not isinstance(operand, Duration):
			return NotImplemented
		return exact(self) != exact(operand)

	def __lt__(self, operand):
		if not isinstance(operand, Duration):
			return NotImplemented
		return exact(self) < exact(operand)

	def __le__(self, operand):
		if not isinstance(operand, Duration):
			return NotImplemented
		return exact(self) <= exact(operand)

	def __gt__(self, operand):
		if not isinstance(operand, Duration):
			return NotImplemented
		return exact(self) > exact(operand)

	def __ge__(self, operand):
		if not isinstance(operand, Duration):
			return NotImplemented
		return exact(self) >= exact(operand)

	def __pos__(self):
		return self

	def __neg__(self):
		return self._from(-self._ticks, 'negation')

	def __abs__(self):
		return self._from(builtins.abs(self._ticks), 'absolute')

	def __add__(self, operand):
		if not isinstance(operand, Duration):
			return NotImplemented
		T = common_type(type(self), type(operand))
		a = _rescale(T, self)
		b = _rescale(T, operand)
		return T._from(_number(a) + _number(b), 'addition')

	def __sub__(self, operand):
		if not isinstance(operand, Duration):
			return NotImplemented
		T = common_type(type(self), type(operand))
		a = _rescale(T, self)
		b = _rescale(T, operand)
		return T._from(_number(a) - _number(b), 'subtraction')

	def __mul__(self, scalar):
		if isinstance(scalar, Duration) or not isinstance(scalar, numbers.Real):
			return NotImplemented

		rep = self.representation
		if not rep.floating and isinstance(scalar, numbers.Integral):
			return self._from(self._ticks * int(scalar), 'multiplication')

		T = duration_type(common_representation(rep, float64), self.period)
		return T._from(_number(self._ticks) * _number(scalar), 'multiplication')
	__rmul__ = __mul__

	def __truediv__(self, operand):
		rep = self.representation

		if isinstance(operand, Duration):
			# Ratio of two durations; a plain number.
			T = common_type(type(self), type(operand))
			a = _rescale(T, self)
			b = _rescale(T, operand)
			if T.representation.floating:
				n = _number(a) / _number(b)
				return n if isinstance(n, float) else float(n)
			return _truncate(a, b)

		if not isinstance(operand, numbers.Real):
			return NotImplemented

		if not rep.floating and isinstance(operand, numbers.Integral):
			return self._from(_truncate(self._ticks, int(operand)), 'division')

		T = duration_type(common_representation(rep, float64), self.period)
		d = _number(operand)
		if d == 0:
			raise ZeroDivisionError("duration division by zero")
		return T._from(_number(self._ticks) / d, 'division')

	def __mod__(self, operand):
		if isinstance(operand, Duration):
			T = common_type(type(self), type(operand))
			if T.representation.floating:
				return NotImplemented
			a = _rescale(T, self)
			b = _rescale(T, operand)
			return T._from(a - (b * _truncate(a, b)), 'remainder')

		if self.representation.floating or not isinstance(operand, numbers.Integral):
			return NotImplemented

		n = int(operand)
		return self._from(self._ticks - (n * _truncate(self._ticks, n)), 'remainder')
abstract.Measure.register(Duration)

_types = {}

def duration_type(representation:Representation, period, name=None, module=None):
	"""
	# Retrieve the &Duration class storing ticks of &period using &representation.

	# Classes are cached; the same arguments always return the same class.

	# [ Parameters ]
	# /representation/
		# The &Representation of the tick count.
	# /period/
		# A &ratio.Period or a positive rational number of seconds.
	# /name/
		# Optional name to assign to the class when it is created.
		# Classes that already exist keep their name.
	# /module/
		# Optional module name to assign to a created class along with &name.
	"""
	if not isinstance(period, ratio.Period):
		period = ratio.Period(period)

	key = (representation, period)
	Class = _types.get(key)
	if Class is None:
		Class = type(name or f"Duration[{representation}, {period}]", (Duration,), {
			'__slots__': (),
			'representation': representation,
			'period': period,
		})
		if name is not None and module is not None:
			Class.__module__ = module
		Class = _types.setdefault(key, Class)

	return Class

def common_type(*types):
	"""
	# Identify the &Duration class that can exactly represent values of all the given &types.
	"""
	if len(types) == 1:
		return types[0]
	return duration_type(
		common_representation(*[T.representation for T in types]),
		ratio.common(*[T.period for T in types]),
	)

def _rescale(Target, duration):
	# Exact conversion into a type whose period divides the duration's period.
	n = _number(duration._ticks)
	if isinstance(n, float):
		return n

	q = n * duration.period.scale(Target.period)
	if Target.representation.floating:
		return Target.representation.admit(q, 'rescale')
	return Target.representation.admit(q.numerator // q.denominator, 'rescale')

def _quotient(Target, duration, operation):
	if not isinstance(duration, Duration):
		raise TypeError(f"{operation} requires a duration, not {type(duration).__name__}")

	n = _number(duration._ticks)
	if isinstance(n, float):
		if not Target.representation.floating:
			raise errors.Overflow(n, Target.representation, operation)
		return n

	return n * duration.period.scale(Target.period)

def _convert(Target, duration, method, operation):
	q = _quotient(Target, duration, operation)
	if isinstance(q, float):
		return Target._from(q, operation)
	return Target._from(method(q), operation)

def cast(Target, duration):
	"""
	# Convert &duration into an instance of &Target.

	# Integer targets truncate toward zero. Floating targets receive the
	# nearest float to the exact value.

	#!python
		assert cast(types.Hours, types.Milliseconds(3600000)) == types.Hours(1)
		assert cast(types.Minutes, types.Hours(-1)).count() == -60

	# [ Exceptions ]
	# /&errors.Overflow/
		# The converted value does not fit in &Target's representation.
	"""
	if Target.representation.floating:
		return Target._from(_quotient(Target, duration, 'cast'), 'cast')
	return _convert(Target, duration, math.trunc, 'cast')

def floor(Target, duration):
	"""
	# Convert &duration into the greatest &Target instance less than or equal to it.
	"""
	return _convert(Target, duration, math.floor, 'floor')

def ceil(Target, duration):
	"""
	# Convert &duration into the least &Target instance greater than or equal to it.
	"""
	return _convert(Target, duration, math.ceil, 'ceil')

def round(Target, duration):
	"""
	# Convert &duration into the nearest &Target instance.

	# Values exactly halfway between two candidates select the candidate
	# whose tick count is even.

	#!python
		assert round(types.Seconds, types.Milliseconds(2500)) == types.Seconds(2)
		assert round(types.Seconds, types.Milliseconds(3500)) == types.Seconds(4)
	"""
	return _convert(Target, duration, builtins.round, 'round')

def convert(Target, duration):
	"""
	# Convert &duration into &Target only when no precision is lost.

	# [ Exceptions ]
	# /&ValueError/
		# The duration is not a whole number of &Target ticks.
	# /&errors.Overflow/
		# The converted value does not fit in &Target's representation.
	"""
	q = _quotient(Target, duration, 'convert')
	if isinstance(q, float) or Target.representation.floating:
		return Target._from(q, 'convert')
	if q.denominator != 1:
		raise ValueError(f"{duration!r} is not a whole number of {Target.__name__}; use floor, ceil, or round")
	return Target._from(q.numerator, 'convert')

class Context(object):
	"""
	# A registry of unit names and their periods.

	# Units are declared with an explicit period or defined as a multiple of a
	# previously declared unit. The standard context is constructed by &.types.
	"""

	def __init__(self):
		self.periods = {} # unit name to ratio.Period
		self.measures = {} # unit name to Duration class

	def declare(self, id, period):
		"""
		# Declare a unit with an explicit period.
		"""
		if not id.isidentifier():
			raise ValueError("unit names must be valid identifiers")
		self.periods[id] = ratio.Period(period)

	def define(self, id, unit, multiple):
		"""
		# Define a unit as a &multiple of an existing &unit.
		"""
		if not id.isidentifier():
			raise ValueError("unit names must be valid identifiers")
		self.periods[id] = ratio.Period(fractions.Fraction(self.periods[unit]) * multiple)

	def period(self, unit) -> ratio.Period:
		"""
		# The period of the named &unit.
		"""
		try:
			return self.periods[unit]
		except KeyError:
			raise ValueError(f"unknown unit {unit!r}") from None

	def new_measure_class(self, unit, qname, representation=int64, module=None):
		"""
		# Create and register the &Duration class designated for &unit.
		"""
		Measure = duration_type(representation, self.period(unit), qname, module)
		self.measures[unit] = Measure
		return Measure

	def measure_from_unit(self, unit):
		"""
		# The &Duration class designated for &unit, or an `int64` duration of its period.
		"""
		if unit in self.measures:
			return self.measures[unit]
		return duration_type(int64, self.period(unit))
