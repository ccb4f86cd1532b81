"""
lib/security/Permission.py

Purpose:
Owner, group and mode bits for a new file.

Place in Architecture:
WriteOptions.Defaults() starts from Permission.Defaults(), applies the configured umask and then asks the login module for the owner.
The two steps fail differently: a bad umask is a ConfigurationError, while a failed login raises IOError for the caller to recover from.

Interface:

	Defaults(): empty user and group, mode 0o777.
	ApplyFileUMask(configuration), ApplyDirectoryUMask(configuration).
	SetUserFromLoginModule(configuration, identity=None).
	Getters / fluent setters for user, group and mode; Copy().

TODOs/FIXMEs:
None.
"""

from ..Constants import *
from .AuthType import *
from .LoginUser import *
from .Mode import *

class Permission(object):
	def __init__(this, user="", group="", mode=DEFAULT_FS_FULL_PERMISSION):
		this.user = user
		this.group = group
		this.mode = mode

	@classmethod
	def Defaults(cls):
		return cls("", "", DEFAULT_FS_FULL_PERMISSION)

	def GetUser(this):
		return this.user

	def GetGroup(this):
		return this.group

	def GetMode(this):
		return this.mode

	def SetUser(this, user):
		this.user = user
		return this

	def SetGroup(this, group):
		this.group = group
		return this

	def SetMode(this, mode):
		this.mode = mode
		return this

	def Copy(this):
		return Permission(this.user, this.group, this.mode)

	# Files additionally lose their execute bits.
	def ApplyFileUMask(this, configuration):
		umask = configuration.GetUMask(SECURITY_AUTHORIZATION_PERMISSION_UMASK)
		this.mode = ApplyUMask(ApplyUMask(this.mode, umask), FILE_UMASK)
		return this

	def ApplyDirectoryUMask(this, configuration):
		umask = configuration.GetUMask(SECURITY_AUTHORIZATION_PERMISSION_UMASK)
		this.mode = ApplyUMask(this.mode, umask)
		return this

	# Take the owner from the login module, unless authentication is off.
	# User and group are set together or not at all.
	# Raises IOError if the identity can't be resolved; nothing is changed in that case.
	def SetUserFromLoginModule(this, configuration, identity=None):
		if (not IsAuthenticationEnabled(configuration)):
			return this

		if (identity is None):
			identity = LoginIdentityProvider()

		user, group = identity.GetUserAndGroup(configuration)
		this.user = user
		this.group = group
		return this

	def __eq__(this, other):
		if (this is other):
			return True
		if (not isinstance(other, Permission)):
			return NotImplemented
		return (this.user, this.group, this.mode) == (other.user, other.group, other.mode)

	def __hash__(this):
		return hash((this.user, this.group, this.mode))

	def __str__(this):
		return f"Permission{{user={this.user}, group={this.group}, mode={this.mode:04o} ({ModeToString(this.mode)})}}"

	__repr__ = __str__
