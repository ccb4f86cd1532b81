"""
lib/Errors.py

Purpose:
Defines the exceptions raised while resolving write options.

Place in Architecture:
Shared by Configuration, the location policy registry, the login module and WriteOptions.
Fatal problems (bad configuration, an unbuildable location policy) are raised to the caller.
IdentityError is the only recoverable one; WriteOptions.Defaults catches it and records a warning instead.

Interface:

	RiverWriteError: base class.
	ConfigurationError: a configuration value is missing or cannot be parsed.
	InstantiationError: a registered class could not be built by name.
	IdentityError: the owning user or group could not be determined.

TODOs/FIXMEs:
None.
"""

class RiverWriteError(Exception):
	pass


class ConfigurationError(RiverWriteError, ValueError):
	def __init__(this, key, message):
		super().__init__(f"{key}: {message}")
		this.key = key


class InstantiationError(RiverWriteError):
	def __init__(this, name, message):
		super().__init__(f"could not create {name!r}: {message}")
		this.name = name


# Subclasses IOError so callers treating the login module like any other I/O can keep doing so.
class IdentityError(RiverWriteError, IOError):
	pass
