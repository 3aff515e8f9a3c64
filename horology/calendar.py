"""
# Field layout dates of the proleptic Gregorian calendar.

# A &Date is a `(year, month, day)` tuple. Construction never fails on
# out-of-range fields; the &Date.valid property reports whether the fields
# identify a calendar day. Conversion to and from the serial layout, a count of
# days since 1970-01-01 held by a &SystemDays point, is exact.

#!python
	d = Date(2000, 2, 29)
	assert d.valid
	assert Date.from_days(d.days()) == d

	# Month arithmetic does not adjust the day.
	assert Date(2001, 1, 31).elapse(months=1) == (2001, 2, 31)
	assert not Date(2001, 1, 31).elapse(months=1).valid

	# The policies are explicit.
	assert Date(2001, 2, 31).clamp() == (2001, 2, 28)
	assert Date(2001, 2, 31).overflow() == (2001, 3, 3)

# Averaged durations, &types.Months and &types.Years, are not accepted by
# &Date.elapse. They can only be applied to serial points where their
# averaged nature is explicit: `Date(2001, 1, 31).days() + types.Months(1)`.

# [ Elements ]
# /SystemDays/
	# &libpoint.TimePoint class of &types.Days since the &libclock.System epoch.
# /LocalDays/
	# &libpoint.TimePoint class of &types.Days since the &libclock.Local epoch.
"""
import numbers

from . import errors
from . import types
from . import libunit
from . import libpoint
from . import libclock
from . import gregorian

SystemDays = libpoint.point_type(libclock.System, types.Days)
LocalDays = libpoint.point_type(libclock.Local, types.Days)

class Date(tuple):
	"""
	# A Gregorian `(year, month, day)` triple that may or may not be valid.
	"""
	__slots__ = ()

	def __new__(Class, year:int, month:int, day:int):
		for x in (year, month, day):
			if not isinstance(x, numbers.Integral):
				raise TypeError("date fields must be integers")
		return super().__new__(Class, (int(year), int(month), int(day)))

	@classmethod
	def of(Class, days:int):
		"""
		# Construct the date identified by the number of &days since 1970-01-01.
		"""
		return Class(*gregorian.civil_from_days(days))

	@classmethod
	def from_days(Class, point):
		"""
		# Construct the date containing the given &point.

		# Points of any clock are accepted; points finer than a day are floored.
		"""
		if not isinstance(point, libpoint.TimePoint):
			raise TypeError(f"expected a time point, not {type(point).__name__}")
		days = libunit.floor(types.Days, point.since_epoch())
		return Class.of(days.count())

	@classmethod
	def today(Class, zone=None):
		"""
		# The current local date in &zone.
		"""
		return Class.from_days(libclock.Local.now(zone))

	@property
	def year(self) -> int:
		return self[0]

	@property
	def month(self) -> int:
		return self[1]

	@property
	def day(self) -> int:
		return self[2]

	@property
	def valid(self) -> bool:
		"""
		# Whether the month is within `1` and `12` and the day exists within the month.
		"""
		return gregorian.is_valid(*self)

	@property
	def weekday(self) -> int:
		"""
		# The day of the week; Sunday is zero.
		"""
		return gregorian.weekday(self.serial())

	def __repr__(self):
		if self.valid:
			return f"{self.__class__.__name__}({self[0]}, {self[1]}, {self[2]})"
		return f"{self.__class__.__name__}({self[0]}, {self[1]}, {self[2]}, valid=False)"

	def __str__(self):
		return f"{self[0]}-{self[1]:02}-{self[2]:02}"

	def serial(self) -> int:
		"""
		# The number of days since 1970-01-01.

		# Invalid fields are not rejected; days and months beyond their range
		# overflow into the following units as defined by &gregorian.days_from_civil.
		"""
		return gregorian.days_from_civil(*self)

	def days(self, clock=libclock.System):
		"""
		# The serial layout of the date; a point of &types.Days since the epoch of &clock.

		# [ Exceptions ]
		# /&errors.InvalidCalendarField/
			# The date is not &valid.
		"""
		if not self.valid:
			raise errors.InvalidCalendarField(*self)
		return libpoint.point_type(clock, types.Days)(types.Days(self.serial()))

	def elapse(self, months=0, years=0):
		"""
		# Adjust the month and year fields. The day is unchanged and the result
		# may not be &valid.

		# [ Parameters ]
		# /months/
			# The number of calendar months to add; carries into the year.
		# /years/
			# The number of calendar years to add.
		"""
		for x in (months, years):
			if isinstance(x, libunit.Duration):
				raise TypeError("dates are adjusted by calendar months and years, not averaged durations")
			if not isinstance(x, numbers.Integral):
				raise TypeError("month and year adjustments must be integers")

		y, m = divmod((self[0] + years) * gregorian.months_in_year + (self[1] - 1) + months, gregorian.months_in_year)
		return self.__class__(y, m + 1, self[2])

	def rollback(self, months=0, years=0):
		"""
		# Adjust the month and year fields backwards; the inverse of &elapse.
		"""
		return self.elapse(months=-months, years=-years)

	def clamp(self):
		"""
		# Policy resolving an invalid day by limiting it to the days of the month.

		# Months outside `1` and `12` are carried into the year first.
		"""
		y, m = divmod(self[0] * gregorian.months_in_year + (self[1] - 1), gregorian.months_in_year)
		m += 1
		d = max(1, min(self[2], gregorian.days_in_month(y, m)))
		return self.__class__(y, m, d)

	def overflow(self):
		"""
		# Policy resolving an invalid date by carrying the excess days and months
		# into the following units.
		"""
		return self.of(self.serial())
