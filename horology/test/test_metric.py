"""
"""
import fractions
from .. import libunit
from .. import metric
from .. import ratio

def test_context():
	ctx = libunit.Context()
	metric.context(ctx)

	assert ctx.period('second') == ratio.seconds
	assert ctx.period('nanosecond') == ratio.nano
	assert ctx.period('kilosecond') == ratio.kilo
	assert ctx.period('exasecond') == ratio.exa

	for name, exponent in metric.name_to_exponent.items():
		assert ctx.period(name) == fractions.Fraction(10) ** exponent
	assert set(ctx.periods) == set(metric.name_to_exponent)
