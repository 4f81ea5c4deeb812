"""Fixed constants: obliquity, astronomical unit, Sun NAIF ID, angle and time units."""

# Sun (NAIF ID), the origin of heliocentric positions
SUN_ID = 10

# Reference epoch J2000.0 (2000-01-01 12:00 TT) as a Julian Day, and the
# Julian Day of 2000-01-01 00:00, the origin of rms-julian day numbers.
J2000_JD = 2451545.0
J2000_MIDNIGHT_JD = 2451544.5

# Obliquity of the ecliptic at J2000 (degrees). The alternative value
# 23.4457889 seen in older tables is not used.
OBLIQUITY_J2000_DEG = 23.43922911

# IAU 2012 astronomical unit (km)
AU_KM = 149597870.7

# Time: seconds per unit
SECONDS_PER_MINUTE = 60.0
SECONDS_PER_DAY = 86400.0

# Angle: degrees per circle and sexagesimal
DEGREES_PER_CIRCLE = 360.0
HOURS_PER_CIRCLE = 24.0
MINUTES_PER_HOUR = 60.0

# Julian Day rounding policies for the century and day-number terms.
ROUNDING_FLOOR = 'floor'
ROUNDING_TRUNC = 'trunc'
ROUNDING_POLICIES = (ROUNDING_FLOOR, ROUNDING_TRUNC)
