"""
# Exceptions raised by horology operations.

# Every fallible operation in the package reports failure by raising one of the
# classes defined here. Each class also inherits from the closest builtin
# exception so that generic handlers continue to work.

# [ Elements ]
# /Error/
	# Base class for all horology errors.
# /InvalidPeriod/
	# A period could not be constructed; zero denominator or a non-positive ratio.
# /Overflow/
	# A value exceeded the range of its representation.
# /InvalidCalendarField/
	# A field-layout date failed validation where a valid one was required.
# /ClockMismatch/
	# Points of different clocks were combined without an explicit conversion.
"""

class Error(Exception):
	"""
	# Base class for horology specific errors.
	"""

class InvalidPeriod(Error, ValueError):
	"""
	# The given numerator and denominator do not describe a positive period.
	"""

	def __init__(self, numerator, denominator):
		self.numerator = numerator
		self.denominator = denominator
		super().__init__(f"invalid period {numerator}/{denominator}")

class Overflow(Error, OverflowError):
	"""
	# The &value could not be stored by &representation.
	"""

	def __init__(self, value, representation, operation=None):
		self.value = value
		self.representation = representation
		self.operation = operation
		if operation:
			msg = f"{operation}: {value!r} exceeds the range of {representation}"
		else:
			msg = f"{value!r} exceeds the range of {representation}"
		super().__init__(msg)

class InvalidCalendarField(Error, ValueError):
	"""
	# A year, month, day combination that does not identify a Gregorian date.
	"""

	def __init__(self, year, month, day):
		self.year = year
		self.month = month
		self.day = day
		super().__init__(f"invalid gregorian date: {year}-{month:02}-{day:02}")

class ClockMismatch(Error, TypeError):
	"""
	# Points of distinct clocks were used together.

	# Points must be converted using a function from &.conversions first.
	"""

	def __init__(self, *clocks):
		self.clocks = clocks
		super().__init__(
			"points of different clocks cannot be combined: " +
			', '.join(c.__name__ for c in clocks)
		)
