# Helpers for POSIX-style mode bits (owner, group, other; rwx each).

_BITS = "rwxrwxrwx"

# RETURNS mode with the bits in umask cleared.
def ApplyUMask(mode, umask):
	return mode & ~umask & 0o777


# RETURNS e.g. "rw-r--r--" for 0o644.
def ModeToString(mode):
	ret = ""
	for i, bit in enumerate(_BITS):
		if (mode & (1 << (8 - i))):
			ret += bit
		else:
			ret += '-'
	return ret
