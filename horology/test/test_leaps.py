"""
# Leap second table parsing and lookup.
"""
import pytest
from .. import leaps
from .. import gregorian

sample = [
	"#\n",
	"#	Leap second list sample.\n",
	"#$	 3676924800\n",
	"#@	3928521600\n",
	"2272060800	10	# 1 Jan 1972\n",
	"2287785600	11	# 1 Jul 1972\n",
	"2303683200	12	# 1 Jan 1973\n",
	"\n",
]

def seconds(*date):
	return gregorian.days_from_civil(*date) * 86400

def test_ntp_delta():
	assert leaps.ntp_delta == 2208988800

def test_parse():
	t = leaps.parse(sample)
	assert t.insertions == (seconds(1972, 7, 1), seconds(1973, 1, 1))
	assert t.expires == 3928521600 - leaps.ntp_delta
	assert len(t) == 2
	assert list(t) == list(t.insertions)

def test_parse_errors():
	with pytest.raises(ValueError):
		leaps.parse(sample[:5] + ["2287785600	12\n"])
	with pytest.raises(ValueError):
		leaps.parse(["2272060800	10	1\n"])
	with pytest.raises(ValueError):
		leaps.parse(["2272060800	ten\n"])

def test_count():
	t = leaps.builtin
	assert t.count(0) == 0
	assert t.count(seconds(1972, 7, 1) - 1) == 0
	assert t.count(seconds(1972, 7, 1)) == 1
	assert t.count(seconds(2016, 12, 31)) == 26
	assert t.count(seconds(2017, 1, 1)) == 27
	assert t.count(seconds(2030, 1, 1)) == 27

def test_utc_count():
	t = leaps.Table([100, 200])
	assert t.utc_count(99) == (0, False)
	# Second 100 of the UTC clock is the first leap second.
	assert t.utc_count(100) == (0, True)
	assert t.utc_count(101) == (1, False)
	assert t.utc_count(200) == (1, False)
	assert t.utc_count(201) == (1, True)
	assert t.utc_count(202) == (2, False)
	assert t.utc_count(10**9) == (2, False)

def test_builtin():
	assert len(leaps.builtin) == 27
	assert leaps.builtin.insertions[0] == seconds(1972, 7, 1)
	assert leaps.builtin.insertions[-1] == seconds(2017, 1, 1)
	assert leaps.builtin.expires is None

def test_expired():
	t = leaps.parse(sample)
	assert not t.expired(t.expires - 1)
	assert t.expired(t.expires)
	assert t.expired(t.expires + 86400)

	# Without an expiration the table is never reported as expired.
	assert not leaps.builtin.expired(seconds(2100, 1, 1))

def test_Table_equality():
	assert leaps.Table([200, 100]) == leaps.Table([100, 200])
	assert hash(leaps.Table([200, 100])) == hash(leaps.Table([100, 200]))
	assert leaps.Table([100]) != leaps.Table([100, 200])
	assert repr(leaps.Table([100], 5)) == '<Table[1] expires=5>'

def test_load(tmp_path):
	f = tmp_path / 'leap-seconds.list'
	f.write_text(''.join(sample))
	assert leaps.load(str(f)) == leaps.parse(sample)

def test_load_environ(tmp_path, monkeypatch):
	f = tmp_path / 'leap-seconds.list'
	f.write_text(''.join(sample))
	monkeypatch.setenv(leaps.environ, str(f))

	assert len(leaps.load()) == 2

	leaps.table.cache_clear()
	try:
		assert len(leaps.table()) == 2
		assert leaps.table() is leaps.table()
	finally:
		leaps.table.cache_clear()

def test_table_fallback(tmp_path, monkeypatch):
	monkeypatch.setenv(leaps.environ, str(tmp_path / 'missing'))
	leaps.table.cache_clear()
	try:
		assert leaps.table() is leaps.builtin
	finally:
		leaps.table.cache_clear()

	f = tmp_path / 'malformed'
	f.write_text("2272060800	10	1\n")
	monkeypatch.setenv(leaps.environ, str(f))
	leaps.table.cache_clear()
	try:
		assert leaps.table() is leaps.builtin
	finally:
		leaps.table.cache_clear()
