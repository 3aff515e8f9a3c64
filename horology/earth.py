"""
# Data regarding Earth-based units of time. (The earth day)
"""

#: Number of seconds contained in a `minute`.
seconds_in_minute = 60

#: Number of minutes contained in an `hour`.
minutes_in_hour = 60

#: Number of hours contained in an earth `day`.
hours_in_day = 24

#: Number of days contained in a `week`.
days_in_week = 7

#: Number of seconds contained in an earth `day`.
seconds_in_day = seconds_in_minute * minutes_in_hour * hours_in_day

#: Number of a days in four Julian years. (365.25 days)
days_in_four_annum = 1461

def context(context):
	import fractions
	context.define('minute', 'second', seconds_in_minute)
	context.define('hour', 'minute', minutes_in_hour)
	context.define('day', 'hour', hours_in_day)
	context.define('week', 'day', days_in_week)
	context.define('annum', 'day', fractions.Fraction(days_in_four_annum, 4))
