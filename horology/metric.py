"""
# Information about the metric second and its multiples.
"""
import fractions

#: The names of the SI multiples associated with their exponent.
name_to_exponent = {
	'attosecond': -18,
	'femtosecond': -15,
	'picosecond': -12,
	'nanosecond': -9,
	'microsecond': -6,
	'millisecond': -3,
	'centisecond': -2,
	'decisecond': -1,
	'second': 0,
	'decasecond': 1,
	'hectosecond': 2,
	'kilosecond': 3,
	'megasecond': 6,
	'gigasecond': 9,
	'terasecond': 12,
	'petasecond': 15,
	'exasecond': 18,
}

def context(context):
	"""
	# Given a &..libunit.Context instance, declare the `second` and define the
	# metric units in terms of it.
	"""
	context.declare('second', 1)

	for name, exponent in name_to_exponent.items():
		if exponent:
			context.define(name, 'second', fractions.Fraction(10) ** exponent)
