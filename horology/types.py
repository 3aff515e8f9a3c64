"""
# Standard duration classes and the unit context resolving unit names.

#!python
	two_hours = types.Hours(2)
	assert types.Minutes.of(two_hours, minute=2) == types.Minutes(122)
	assert types.select('minute') is types.Minutes

# All of the standard classes store their ticks using &libunit.int64.

# [ Elements ]

# /Context/
	# The &libunit.Context declaring the metric, earth, and averaged Gregorian units.
# /select/
	# Retrieve the &libunit.Duration class designated for a unit name.
# /Months/
	# Averaged Gregorian month, 2629746 seconds. Arithmetic with &Months does
	# not track month boundaries; use &.calendar.Date for calendar months.
# /Years/
	# Averaged Gregorian year, 31556952 seconds.
"""
from . import libunit
from . import metric
from . import earth
from . import gregorian

Context = libunit.Context()
metric.context(Context)
earth.context(Context)
gregorian.context(Context)
libunit.Duration.context = Context

def _measure(unit, name):
	return Context.new_measure_class(unit, name, libunit.int64, __name__)

Nanoseconds = _measure('nanosecond', 'Nanoseconds')
Microseconds = _measure('microsecond', 'Microseconds')
Milliseconds = _measure('millisecond', 'Milliseconds')
Seconds = _measure('second', 'Seconds')
Minutes = _measure('minute', 'Minutes')
Hours = _measure('hour', 'Hours')
Days = _measure('day', 'Days')
Weeks = _measure('week', 'Weeks')
Months = _measure('month', 'Months')
Years = _measure('year', 'Years')
del _measure

#: A tuple containing all of the standard duration classes ordered by period.
MeasureTypes = (
	Nanoseconds,
	Microseconds,
	Milliseconds,
	Seconds,
	Minutes,
	Hours,
	Days,
	Weeks,
	Months,
	Years,
)

select = Context.measure_from_unit
