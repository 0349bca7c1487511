import math


def ubasename(upath):
	return upath.split("/")[-1]


# Join a directory upath and a file name with exactly one separator.
# RETURNS None if either part is missing.
def ujoin(base, name):
	if (base is None or name is None):
		return None

	if (base.endswith("/")):
		return f"{base}{name}"
	return f"{base}/{name}"


# Convert a timeout setting (seconds, as a number or string) to a float.
# Raises ValueError unless the result is positive and finite.
def parse_timeout(value):
	timeout = float(value)
	if (not 0 < timeout < math.inf):
		raise ValueError(f"{value} is not a valid timeout")
	return timeout


def parse_count(value):
	count = int(value)
	if (count < 1):
		raise ValueError(f"{value} is not a valid count")
	return count
