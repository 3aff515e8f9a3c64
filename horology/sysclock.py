"""
# Raw system clock access.

# The readers are module attributes so that alternative sources can be
# substituted; &real and &monotonic resolve them at call time.
"""
import time

_real_clock_read = time.time_ns
_monotonic_clock_read = time.monotonic_ns

def real() -> int:
	"""
	# Nanoseconds since 1970-01-01T00:00:00 according to the system's real clock.
	"""
	return _real_clock_read()

def monotonic() -> int:
	"""
	# Snapshot of the system's monotonic clock in nanoseconds.

	# The epoch is unspecified; only differences between snapshots are meaningful.
	"""
	return _monotonic_clock_read()
