"""
# Zones for adjusting system time into and out of local forms.

# Time zone databases are not provided; &Offset implements fixed offsets and
# &system consults the operating system's configured zone using &time.localtime.
# Any object implementing &abstract.Zone can be given to the &.libclock.Local
# conversions.

#!python
	from horology import views, libclock, conversions

	est = views.Offset.of(hours=-5, abbreviation='EST')
	lt = conversions.local_from_system(libclock.System.now(), est)
"""
import time

from . import errors
from . import types
from . import abstract
from . import libunit

class Offset(tuple):
	"""
	# A fixed UTC offset constructed from a tuple of the form: `(magnitude, abbreviation)`.
	"""
	__slots__ = ()

	@classmethod
	def of(Class, hours=0, minutes=0, seconds=0, abbreviation=None):
		"""
		# Construct an offset from its components.
		"""
		magnitude = types.Seconds.of(hour=hours, minute=minutes, second=seconds)
		return Class((magnitude, abbreviation))

	@property
	def magnitude(self) -> types.Seconds:
		"""
		# The offset from UTC.
		"""
		return self[0]

	@property
	def abbreviation(self):
		"""
		# The offset's abbreviation; such as UTC, GMT, and EST.
		"""
		return self[1]

	def offset(self, point):
		"""
		# The &magnitude regardless of &point.
		"""
		return self[0]

	def __str__(self):
		s = self.magnitude.count()
		h, m = divmod(abs(s) // 60, 60)
		sign = '-' if s < 0 else '+'
		return f"{self.abbreviation or 'UTC'}{sign}{h:02}:{m:02}"

	def __repr__(self):
		return f"<{self.__class__.__name__}({self.abbreviation}: {self.magnitude.count()})>"
abstract.Zone.register(Offset)

utc = Offset((types.Seconds(0), 'UTC'))

class System(object):
	"""
	# The zone configured by the operating system.

	# Offsets are resolved by &time.localtime for the second containing the point.
	"""
	__slots__ = ()

	def offset(self, point):
		seconds = libunit.floor(types.Seconds, point.since_epoch()).count()
		try:
			lt = time.localtime(seconds)
		except (OverflowError, OSError):
			raise errors.Overflow(seconds, 'time_t', 'localtime') from None
		return types.Seconds(lt.tm_gmtoff)

	def __repr__(self):
		return f"<{self.__class__.__name__}: {'/'.join(time.tzname)}>"
abstract.Zone.register(System)

#: The zone configured by the operating system.
system = System()
