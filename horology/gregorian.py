"""
# Gregorian calendar functions and data.

# Day counts are relative to 1970-01-01 and the calendar is proleptic; it is
# extended backwards before its adoption, and year zero exists.

# The conversions between day counts and `(year, month, day)` fields are closed
# form integer expressions over the 400 year Gregorian cycle. The year is shifted
# to begin in March so that the leap day is the last day of the shifted year.
"""
import fractions

#: number of centuries in a gregorian cycle.
centuries_in_cycle = 4

#: number of years in a century.
years_in_century = 100

#: number of years in a decade
years_in_decade = 10

#: number of centuries in a millennium
centuries_in_millennium = 10

#: number of years in a gregorian cycle.
years_in_cycle = years_in_century * centuries_in_cycle

#: number of days in a gregorian cycle.
days_in_cycle = 146097

#: english names of the months of the year.
month_names = (
	"january",
	"february",
	"march",
	"april",
	"may",
	"june",
	"july",
	"august",
	"september",
	"october",
	"november",
	"december",
)

#: number of months in a year.
months_in_year = len(month_names)

#: Definition of a year in terms of gregorian month-to-days.
calendar_year = (
	31, 28, 31, 30,
	31, 30, 31, 31,
	30, 31, 30, 31
)

#: Definition of a leap year in terms of gregorian month-to-days.
calendar_leap = (calendar_year[0], calendar_year[1] + 1) + calendar_year[2:] # Feb29

#: Average length of a gregorian year in days.
average_year = fractions.Fraction(days_in_cycle, years_in_cycle)

#: Days from 0000-03-01 to 1970-01-01.
epoch_shift = 719468

#: Bounds of the supported year range.
minimum_year = -32767
maximum_year = 32767

def year_is_leap(y):
	"""
	# Given a gregorian calendar year, determine whether it is a leap year.
	"""
	if y % 4 == 0 and (y % 400 == 0 or not y % 100 == 0):
		return True
	return False

def days_in_month(year, month):
	"""
	# The number of days in the &month of &year.

	# [ Exceptions ]
	# /&ValueError/
		# &month is not within `1` and `12`.
	"""
	if not 1 <= month <= months_in_year:
		raise ValueError(f"month {month} is not within 1 and {months_in_year}")
	if year_is_leap(year):
		return calendar_leap[month - 1]
	return calendar_year[month - 1]

def is_valid(year, month, day) -> bool:
	"""
	# Whether the fields identify a day of the Gregorian calendar.
	"""
	if not 1 <= month <= months_in_year:
		return False
	return 1 <= day <= days_in_month(year, month)

def days_from_civil(year, month, day) -> int:
	"""
	# Convert a Gregorian date to the number of days since 1970-01-01.

	# The fields are not validated. Months outside `1` and `12` carry into the
	# year and days beyond the end of the month continue into the following months:

	#!python
		assert days_from_civil(1970, 1, 1) == 0
		assert days_from_civil(2001, 4, 31) == days_from_civil(2001, 5, 1)
		assert days_from_civil(2000, 13, 1) == days_from_civil(2001, 1, 1)
	"""
	carry, month = divmod(month - 1, months_in_year)
	year = year + carry
	month += 1

	if month <= 2:
		year -= 1

	era, yoe = divmod(year, years_in_cycle)
	# Month of the shifted year; March is zero.
	mp = (month + 9) % months_in_year
	doy = (153 * mp + 2) // 5 + day - 1
	doe = yoe * 365 + yoe // 4 - yoe // 100 + doy

	return era * days_in_cycle + doe - epoch_shift

def civil_from_days(days:int):
	"""
	# Convert the number of days since 1970-01-01 into a Gregorian date in the common form:
	# `(year, month, day)`.

	#!python
		assert civil_from_days(0) == (1970, 1, 1)
		assert civil_from_days(-1) == (1969, 12, 31)
	"""
	era, doe = divmod(days + epoch_shift, days_in_cycle)
	yoe = (doe - doe // 1460 + doe // 36524 - doe // 146096) // 365
	doy = doe - (365 * yoe + yoe // 4 - yoe // 100)
	mp = (5 * doy + 2) // 153
	day = doy - (153 * mp + 2) // 5 + 1
	month = mp + 3 if mp < 10 else mp - 9

	year = yoe + era * years_in_cycle
	if month <= 2:
		year += 1

	return (year, month, day)

def weekday(days:int) -> int:
	"""
	# The day of the week of the given day count. Sunday is zero.
	"""
	# 1970-01-01 was a Thursday.
	return (days + 4) % 7

def context(context):
	# Averaged units; not aligned with calendar months or years.
	context.define('year', 'day', average_year)
	context.define('month', 'year', fractions.Fraction(1, months_in_year))
	context.define('decade', 'year', years_in_decade)
	context.define('century', 'year', years_in_century)
	context.define('millennium', 'century', centuries_in_millennium)
