"""
# Conversions between the points of distinct clocks.
"""
import pytest
from .. import conversions
from .. import errors
from .. import gregorian
from .. import leaps
from .. import libclock
from .. import libpoint
from .. import types
from .. import views

System = libclock.System
Utc = libclock.Utc
table = leaps.builtin

def at(clock, *date, seconds=0):
	s = types.Seconds(gregorian.days_from_civil(*date) * 86400 + seconds)
	return libpoint.point_type(clock, types.Seconds)(s)

def test_offsets():
	assert conversions.tai_utc_offset == types.Seconds(378691210)
	assert conversions.gps_utc_offset == types.Seconds(315964809)
	assert conversions.file_system_offset == types.Seconds(11644473600)
	assert conversions.file_system_offset.count() == 116444736000000000

def test_utc_from_system():
	p = conversions.utc_from_system(at(System, 1970, 1, 1), table)
	assert p.clock is Utc
	assert p.since_epoch() == types.Seconds(0)

	p = conversions.utc_from_system(at(System, 2017, 1, 1), table)
	assert p == at(Utc, 2017, 1, 1, seconds=27)

	p = conversions.utc_from_system(at(System, 2016, 12, 31, seconds=86399), table)
	assert p == at(Utc, 2016, 12, 31, seconds=86399 + 26)

def test_system_from_utc():
	assert conversions.system_from_utc(at(Utc, 2017, 1, 1, seconds=27), table) == at(System, 2017, 1, 1)
	assert conversions.system_from_utc(at(Utc, 2016, 12, 31, seconds=86399 + 26), table) == at(System, 2016, 12, 31, seconds=86399)

	# The inserted second maps to the last representable point before the insertion.
	leap = Utc.time_point(at(Utc, 2017, 1, 1, seconds=26).since_epoch())
	r = conversions.system_from_utc(leap, table)
	assert r.clock is System
	assert r.duration is types.Nanoseconds
	assert r == System.time_point(at(System, 2017, 1, 1).since_epoch() - types.Nanoseconds(1))

	half = Utc.time_point(leap.since_epoch() + types.Milliseconds(500))
	r = conversions.system_from_utc(half, table)
	assert r.since_epoch() == at(System, 2017, 1, 1).since_epoch() - types.Nanoseconds(1)

	# Coarser points use their own tick.
	coarse = libpoint.point_type(Utc, types.Seconds)(leap.since_epoch())
	r = conversions.system_from_utc(coarse, table)
	assert r.duration is types.Seconds
	assert r == at(System, 2017, 1, 1, seconds=-1)

def test_utc_round_trip():
	for n in range(-10, 10):
		p = at(System, 2012, 7, 1, seconds=n)
		assert conversions.system_from_utc(conversions.utc_from_system(p, table), table) == p

def test_leap_second_info():
	assert conversions.leap_second_info(at(Utc, 2017, 1, 1, seconds=25), table) == (False, types.Seconds(26))
	assert conversions.leap_second_info(at(Utc, 2017, 1, 1, seconds=26), table) == (True, types.Seconds(27))
	assert conversions.leap_second_info(at(Utc, 2017, 1, 1, seconds=27), table) == (False, types.Seconds(27))
	assert conversions.leap_second_info(at(Utc, 1970, 1, 1), table) == (False, types.Seconds(0))

def test_empty_table():
	empty = leaps.Table([])
	p = at(System, 2020, 1, 1)
	assert conversions.utc_from_system(p, empty).since_epoch() == p.since_epoch()

def test_tai():
	p = conversions.tai_from_utc(at(Utc, 1970, 1, 1))
	assert p.clock is libclock.Tai
	assert p.since_epoch() == types.Seconds(378691210)
	assert conversions.utc_from_tai(p) == at(Utc, 1970, 1, 1)

	# The TAI epoch.
	p = conversions.tai_from_utc(at(Utc, 1958, 1, 1, seconds=-10))
	assert p.since_epoch() == types.Seconds(0)

def test_gps():
	p = conversions.gps_from_utc(at(Utc, 1980, 1, 6, seconds=9))
	assert p.clock is libclock.Gps
	assert p.since_epoch() == types.Seconds(0)
	assert conversions.utc_from_gps(p) == at(Utc, 1980, 1, 6, seconds=9)

def test_file():
	p = conversions.file_from_system(at(System, 1601, 1, 1))
	assert p.clock is libclock.File
	assert type(p) is libclock.File.time_point
	assert p.since_epoch() == types.Seconds(0)

	p = conversions.file_from_system(at(System, 1970, 1, 1))
	assert p.since_epoch() == types.Seconds(11644473600)
	assert conversions.system_from_file(p) == at(System, 1970, 1, 1)

	u = at(Utc, 2017, 1, 1, seconds=27)
	f = conversions.file_from_utc(u, table)
	assert f == conversions.file_from_system(at(System, 2017, 1, 1))
	assert conversions.utc_from_file(f, table) == u

def test_file_from_nanoseconds():
	# System points are stored in nanoseconds; the epoch offset does not fit
	# that representation, so the point is floored to file ticks first.
	p = System.time_point(types.Nanoseconds(1483228800 * 10**9 + 123456789))
	f = conversions.file_from_system(p)
	assert type(f) is libclock.File.time_point
	assert f.since_epoch().count() == (1483228800 + 11644473600) * 10**7 + 1234567

	s = conversions.system_from_file(f)
	assert s.since_epoch() == types.Nanoseconds(1483228800 * 10**9 + 123456700)

	u = Utc.time_point(p.since_epoch() + types.Seconds(27))
	assert conversions.file_from_utc(u, table) == f

def test_file_from_system_now():
	f = conversions.file_from_system(System.now())
	assert f.clock is libclock.File
	assert f.since_epoch() > conversions.file_system_offset

	f = conversions.file_from_utc(libclock.Utc.now(), table)
	assert f.since_epoch() > conversions.file_system_offset

def test_wrong_clock():
	with pytest.raises(errors.ClockMismatch) as exc:
		conversions.tai_from_utc(at(System, 1970, 1, 1))
	assert exc.value.clocks == (Utc, System)

	with pytest.raises(errors.ClockMismatch):
		conversions.utc_from_system(at(Utc, 1970, 1, 1), table)
	with pytest.raises(errors.ClockMismatch):
		conversions.utc_from_gps(at(libclock.Tai, 1970, 1, 1))
	with pytest.raises(TypeError):
		conversions.system_from_file(types.Seconds(1))

def test_local():
	est = views.Offset.of(hours=-5, abbreviation='EST')
	p = at(System, 2000, 1, 1)

	lt = conversions.local_from_system(p, est)
	assert lt.clock is libclock.Local
	assert lt.since_epoch() == p.since_epoch() - types.Hours(5)
	assert conversions.system_from_local(lt, est) == p

	assert conversions.local_from_system(p, views.utc).since_epoch() == p.since_epoch()

	with pytest.raises(TypeError):
		conversions.local_from_system(p, 'EST')
	with pytest.raises(errors.ClockMismatch):
		conversions.system_from_local(p, est)

class Transition(object):
	"""
	# Zone changing from -5 to -4 hours at a fixed system point.
	"""
	def __init__(self, at):
		self.at = at

	def offset(self, point):
		if point.since_epoch() < self.at:
			return types.Hours(-5)
		return types.Hours(-4)

def test_local_transition():
	change = at(System, 2000, 4, 2, seconds=7 * 3600).since_epoch()
	zone = Transition(change)

	for n in (-7200, -1, 0, 1, 7200):
		p = System.time_point(change + types.Seconds(n))
		lt = conversions.local_from_system(p, zone)
		assert conversions.system_from_local(lt, zone) == p
