__pkg_bottom__ = True
identity = 'http://fault.io/project/python/horology'
name = 'horology'
abstract = 'Rational tick durations, typed clocks, and exact Gregorian date conversion.'
icon = '⌛'
study = 'horology'

controller = 'fault.io'
contact = 'mailto:critical@fault.io'

version_info = (0, 1, 0)
version = '.'.join(map(str, version_info))
