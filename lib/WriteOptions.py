"""
lib/WriteOptions.py

Purpose:
Options for writing a new file: block size, TTL, block location policy, write type and permission.

Place in Architecture:
Built once per write call by Defaults() from an explicitly passed Configuration, adjusted by the caller through the fluent setters, then read by the write path.
Each write call owns its own instance. Instances are not safe for concurrent mutation.

Interface:

	Defaults(configuration, identity=None): RETURNS a fully populated WriteOptions.
	Getters: GetBlockSizeBytes(), GetTtl(), GetLocationPolicy(), GetWriteType(), GetPermission(), GetStorageType(), GetUnderStorageType(), GetWarnings().
	Fluent setters (mutate and return this): SetBlockSizeBytes(), SetTtl(), SetLocationPolicy(), SetWriteType(), SetPermission().
	Copy(): an independent instance with the same fields.

TODOs/FIXMEs:
None.
"""

import copy
import logging

from .Constants import *
from .Errors import *
from .WriteType import *
from .policy.LocationPolicy import LocationPolicy
from .security.Permission import Permission

# Recorded on a WriteOptions when the owner of new files could not be resolved.
# The options are still usable; the permission just has the default (empty) user and group.
class PermissionFallback(object):
	def __init__(this, error, permission):
		this.error = error
		this.permission = permission.Copy()

	def __str__(this):
		return f"Could not resolve the owner of new files ({this.error}); falling back to {this.permission}"

	__repr__ = __str__


class WriteOptions(object):
	def __init__(this, blockSizeBytes, ttl, locationPolicy, writeType, permission):
		this.blockSizeBytes = blockSizeBytes
		this.ttl = ttl # Milliseconds until the file is deleted, pinned or not. NO_TTL to keep it.
		this.locationPolicy = locationPolicy
		this.writeType = writeType
		this.permission = permission

		# Diagnostics about how these options were built. Not part of the value.
		this.warnings = []


	# Build the default options from configuration alone.
	# A location policy that can't be built, or an unparseable value, raises; nothing is returned in that case.
	# Failing to find the owner of new files does not raise. The umask is still applied, the user and group stay empty and a PermissionFallback is logged and recorded.
	@classmethod
	def Defaults(cls, configuration, identity=None):
		blockSizeBytes = configuration.GetBytes(USER_BLOCK_SIZE_BYTES_DEFAULT)
		locationPolicy = configuration.GetInstance(USER_FILE_WRITE_LOCATION_POLICY, LocationPolicy)
		writeType = configuration.GetEnum(USER_FILE_WRITE_TYPE_DEFAULT, WriteType)

		warnings = []
		permission = Permission.Defaults().ApplyFileUMask(configuration)
		try:
			permission.SetUserFromLoginModule(configuration, identity)
		except IOError as e:
			warning = PermissionFallback(e, permission)
			logging.warning(str(warning))
			warnings.append(warning)

		ret = cls(blockSizeBytes, NO_TTL, locationPolicy, writeType, permission)
		ret.warnings = warnings
		logging.debug(f"Resolved default {ret}")
		return ret


	def GetBlockSizeBytes(this):
		return this.blockSizeBytes

	def GetTtl(this):
		return this.ttl

	def GetLocationPolicy(this):
		return this.locationPolicy

	def GetWriteType(this):
		return this.writeType

	# Whether the cache tier keeps the data. Follows the write type.
	def GetStorageType(this):
		return this.writeType.GetStorageType()

	# Whether and how the under storage persists the data. Follows the write type.
	def GetUnderStorageType(this):
		return this.writeType.GetUnderStorageType()

	def GetPermission(this):
		return this.permission

	def GetWarnings(this):
		return list(this.warnings)


	def SetBlockSizeBytes(this, blockSizeBytes):
		this.blockSizeBytes = blockSizeBytes
		return this

	def SetTtl(this, ttl):
		this.ttl = ttl
		return this

	def SetLocationPolicy(this, locationPolicy):
		this.locationPolicy = locationPolicy
		return this

	# Overrides both the StorageType and the UnderStorageType.
	def SetWriteType(this, writeType):
		this.writeType = writeType
		return this

	def SetPermission(this, permission):
		this.permission = permission
		return this


	# The copy gets its own location policy and permission, so policy state (e.g. a round robin cursor) is never shared between two options.
	def Copy(this):
		ret = WriteOptions(this.blockSizeBytes, this.ttl, copy.copy(this.locationPolicy), this.writeType, this.permission.Copy())
		ret.warnings = list(this.warnings)
		return ret


	def GetFields(this):
		return (this.blockSizeBytes, this.ttl, this.locationPolicy, this.writeType, this.permission)

	def __eq__(this, other):
		if (this is other):
			return True
		if (not isinstance(other, WriteOptions)):
			return NotImplemented
		return this.GetFields() == other.GetFields()

	def __hash__(this):
		return hash(this.GetFields())

	def __str__(this):
		return (
			"WriteOptions{"
			f"blockSizeBytes={this.blockSizeBytes}, "
			f"ttl={this.ttl}, "
			f"locationPolicy={this.locationPolicy}, "
			f"writeType={this.writeType}, "
			f"permission={this.permission}"
			"}"
		)

	__repr__ = __str__
