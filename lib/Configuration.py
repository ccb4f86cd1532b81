"""
lib/Configuration.py

Purpose:
A key/value configuration source with typed accessors.

Place in Architecture:
Passed explicitly to WriteOptions.Defaults() and the security helpers; nothing in this package reads configuration from a global.
Values are read once, when the options are built.

Interface:

	__init__(values=None): built-in defaults (see Constants.DEFAULTS), overridden by values.
	FromEnvironment(prefix="RIVER_", environ=None), FromJsonFile(path): alternate constructors.
	Get(key, default), Set(key, value), Contains(key), Lookup(key).
	Typed getters: GetBytes(), GetEnum(), GetUMask(), GetInstance().

TODOs/FIXMEs:
None.
"""

import os
import json
import logging

from .Constants import *
from .Errors import *
from .Utils import *

# Marks "no default given" so None can still be a legitimate default.
_REQUIRED = object()

class Configuration(object):
	def __init__(this, values=None):
		this.defaults = dict(DEFAULTS)
		this.values = {}
		if (values):
			this.values.update(values)


	# Build a Configuration from environment variables.
	# RIVER_USER_BLOCK_SIZE_BYTES_DEFAULT becomes river.user.block.size.bytes.default.
	@classmethod
	def FromEnvironment(cls, prefix="RIVER_", environ=None):
		if (environ is None):
			environ = os.environ

		values = {}
		for name, value in environ.items():
			if (not name.startswith(prefix)):
				continue
			values[name.lower().replace('_', '.')] = value

		logging.debug(f"Loaded {len(values)} configuration values from the environment")
		return cls(values)


	@classmethod
	def FromJsonFile(cls, path):
		try:
			with open(path, 'r') as file:
				values = json.load(file)
		except (IOError, OSError) as e:
			raise ConfigurationError(str(path), f"could not read configuration file: {e}") from e
		except ValueError as e:
			raise ConfigurationError(str(path), f"not valid JSON: {e}") from e

		if (not isinstance(values, dict)):
			raise ConfigurationError(str(path), "configuration file must hold a JSON object")

		logging.debug(f"Loaded {len(values)} configuration values from {path}")
		return cls(values)


	# Find the raw value for key.
	# Explicit values win over the built-in defaults.
	# RETURNS the value or None if the key is unknown.
	def Lookup(this, key):
		if (key in this.values):
			return this.values[key]
		return this.defaults.get(key)


	def Contains(this, key):
		return this.Lookup(key) is not None


	def Get(this, key, default=_REQUIRED):
		value = this.Lookup(key)
		if (value is None):
			if (default is _REQUIRED):
				raise ConfigurationError(key, "no value configured")
			return default
		return value


	def Set(this, key, value):
		this.values[key] = value
		return this


	# RETURNS the number of bytes for key; accepts plain integers and sizes like "64MB" (binary multipliers).
	def GetBytes(this, key):
		value = this.Get(key)
		try:
			return parse_size(value)
		except ValueError:
			raise ConfigurationError(key, f"{value!r} is not a valid size specifier")


	# RETURNS the member of enumType named by key. Names are matched case-insensitively.
	def GetEnum(this, key, enumType):
		value = this.Get(key)
		if (isinstance(value, enumType)):
			return value

		try:
			return enumType[str(value).strip().upper()]
		except KeyError:
			valid = ", ".join(member.name for member in enumType)
			raise ConfigurationError(key, f"{value!r} is not a valid {enumType.__name__} (expected one of {valid})")


	def GetUMask(this, key):
		value = this.Get(key)
		try:
			return parse_umask(value)
		except (ValueError, AttributeError):
			raise ConfigurationError(key, f"{value!r} is not a valid umask")


	# Build the implementation of capability named by key.
	# capability must be a Registrable root, e.g. LocationPolicy. key holds a lookup name, never an import path.
	# Failures raise InstantiationError.
	def GetInstance(this, key, capability):
		return capability.Create(this.Get(key))


	def __str__(this):
		merged = dict(this.defaults)
		merged.update(this.values)
		return f"{type(this).__name__}({merged})"
