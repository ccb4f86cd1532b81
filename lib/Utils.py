import re
import logging

from .Constants import *

# Byte counts for storage use binary multipliers: "64MB" and "64MiB" are both 64 * 1024**2 bytes.
def parse_size(size_str):
	if (type(size_str) == int):
		return size_str

	multipliers = {
		't': 1024**4,
		'g': 1024**3,
		'm': 1024**2,
		'k': 1024**1,
		'tb': 1024**4,
		'gb': 1024**3,
		'mb': 1024**2,
		'kb': 1024**1,
		'tib': 1024**4,
		'gib': 1024**3,
		'mib': 1024**2,
		'kib': 1024**1,
	}
	size_re = re.compile(r'^\s*(\d+)\s*(%s)?\s*$' % ("|".join(list(multipliers.keys())),), 
						 re.I)

	m = size_re.match(str(size_str))
	if not m:
		raise ValueError("not a valid size specifier")

	size = int(m.group(1))
	multiplier = m.group(2)
	if multiplier is not None:
		try:
			size *= multipliers[multiplier.lower()]
		except KeyError:
			raise ValueError("invalid size multiplier")

	return size


# Umasks are written in octal, e.g. "022" or "0027".
def parse_umask(umask_str):
	if (type(umask_str) == int):
		umask = umask_str
	else:
		umask_str = umask_str.strip()
		if not re.match(r'^[0-7]{1,4}$', umask_str):
			raise ValueError("not a valid umask")
		umask = int(umask_str, 8)

	if not 0 <= umask <= MAX_UMASK:
		raise ValueError("umask out of range")
	return umask


def parse_log_level(log_level):
	try:
		return {'error': logging.ERROR,
				'warning': logging.WARNING,
				'info': logging.INFO,
				'debug': logging.DEBUG}[log_level]
	except KeyError:
		raise ValueError("invalid log level specifier")
