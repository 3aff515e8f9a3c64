"""
# Rational tick periods.

# A &Period is the number of seconds represented by a single tick of a duration.
# Periods are always reduced and strictly positive; construction with a zero
# denominator or a non-positive ratio raises &.errors.InvalidPeriod.

#!python
	assert ratio.Period(1000, 1000000) == ratio.milli
	assert ratio.common(ratio.Period(60), ratio.milli) == ratio.milli
	assert ratio.Period(60) > ratio.Period(1)

# [ Elements ]
# /seconds/
	# The unit period; one second per tick.
# /atto/
	# 10^-18 seconds.
# /exa/
	# 10^18 seconds.
"""
import math
import fractions
from . import errors

class Period(fractions.Fraction):
	"""
	# A reduced, positive fraction of seconds per tick.

	# Comparisons and hashing are inherited from &fractions.Fraction which
	# performs exact cross multiplication.
	"""
	__slots__ = ()

	def __new__(Class, numerator=1, denominator=1):
		if denominator == 0:
			raise errors.InvalidPeriod(numerator, denominator)

		self = super().__new__(Class, numerator, denominator)
		if self <= 0:
			raise errors.InvalidPeriod(numerator, denominator)
		return self

	def __repr__(self):
		if self.denominator == 1:
			return f"{self.__class__.__name__}({self.numerator})"
		return f"{self.__class__.__name__}({self.numerator}, {self.denominator})"

	def __str__(self):
		return f"{self.numerator}/{self.denominator}"

	def __reduce__(self):
		return (self.__class__, (self.numerator, self.denominator))

	def scale(self, target) -> fractions.Fraction:
		"""
		# The exact factor converting a tick count of &self into ticks of &target.

		#!python
			assert ratio.seconds.scale(ratio.milli) == 1000
		"""
		return fractions.Fraction(self) / fractions.Fraction(target)

def reduce(numerator:int, denominator:int) -> Period:
	"""
	# Construct the &Period `numerator/denominator` in lowest terms.
	"""
	return Period(numerator, denominator)

def common(former:Period, latter:Period, *periods) -> Period:
	"""
	# Identify the coarsest period that exactly divides all the given periods.

	# The numerator is the greatest common divisor of the numerators and the
	# denominator is the least common multiple of the denominators.
	"""
	ps = (former, latter) + periods
	return Period(
		math.gcd(*[p.numerator for p in ps]),
		math.lcm(*[p.denominator for p in ps]),
	)

seconds = Period(1)

atto = Period(1, 10**18)
femto = Period(1, 10**15)
pico = Period(1, 10**12)
nano = Period(1, 10**9)
micro = Period(1, 10**6)
milli = Period(1, 10**3)
centi = Period(1, 10**2)
deci = Period(1, 10)
deca = Period(10)
hecto = Period(10**2)
kilo = Period(10**3)
mega = Period(10**6)
giga = Period(10**9)
tera = Period(10**12)
peta = Period(10**15)
exa = Period(10**18)
