"""
# Various constants.

# [ Elements ]

# /zero/
	# Precision indifferent zero measurement.
# /annum/
	# Julian year; 365.25 days.
# /unix_epoch/
	# &libclock.System point at 1970-01-01.
# /unix_epoch_date/
	# &calendar.Date of the system and UTC clock epochs.
# /tai_epoch_date/
	# &calendar.Date of the TAI clock epoch.
# /gps_epoch_date/
	# &calendar.Date of the GPS clock epoch.
# /file_epoch_date/
	# &calendar.Date of the file clock epoch.
"""
from . import types
from . import libclock
from . import calendar

zero = types.Seconds.zero()
annum = types.Seconds.of(annum=1) # Julian Year, 525960 minutes.

unix_epoch = libclock.System.time_point()
unix_epoch_date = calendar.Date(1970, 1, 1)
tai_epoch_date = calendar.Date(1958, 1, 1)
gps_epoch_date = calendar.Date(1980, 1, 6)
file_epoch_date = calendar.Date(1601, 1, 1)
