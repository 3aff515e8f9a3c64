"""
[ About ]
---------

horology is a time package based on exact rational arithmetic. Durations are
tick counts stored by a fixed-width representation and scaled by a reduced
fraction of seconds, the period. Each representation and period pair is a
distinct class, so mixing units is always either resolved through a common
period or requested explicitly with a cast.

Calendar Support:

	- Proleptic Gregorian

horology's APIs are *not* compatible with the standard library's datetime module.

[ Durations ]
-------------

The standard duration classes are provided by &.types:

#!/pl/python
	from horology import types, libunit

	assert types.Hours(1) + types.Minutes(30) == types.Minutes(90)
	assert libunit.cast(types.Hours, types.Milliseconds(3600000)) == types.Hours(1)

Sums of different units produce the common type; the coarsest period that
exactly represents both operands:

#!/pl/python
	d = types.Seconds(1) + types.Milliseconds(5)
	assert type(d) is types.Milliseconds

Conversions to coarser units truncate toward zero with &.libunit.cast, or round
with &.libunit.floor, &.libunit.ceil, and &.libunit.round. Results that do not fit
in the representation raise &.errors.Overflow.

[ Clocks ]
----------

&.libclock provides the clocks. There is no default clock; monotonic
measurements use &.libclock.Steady and wall clock time uses &.libclock.System.

#!/pl/python
	from horology import libclock

	start = libclock.Steady.now()
	work()
	elapsed = libclock.Steady.now() - start

Points of different clocks cannot be combined. &.conversions provides the
explicit mappings between the UTC, TAI, GPS, file, system, and local clocks.

[ Calendar Representation ]
---------------------------

&.calendar.Date represents a day by its fields. Invalid combinations are
representable and flagged rather than rejected:

#!/pl/python
	from horology import calendar

	d = calendar.Date(2023, 2, 29)
	assert not d.valid
	assert d.clamp() == (2023, 2, 28)

	point = calendar.Date(2000, 2, 29).days()
	assert calendar.Date.from_days(point + types.Days(1)) == (2000, 3, 1)
"""
