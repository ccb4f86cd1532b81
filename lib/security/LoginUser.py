"""
lib/security/LoginUser.py

Purpose:
Determines who is writing: the login user name and their primary group.

Place in Architecture:
Permission.SetUserFromLoginModule() asks an IdentityProvider for the owner of a new file.
LoginIdentityProvider is the default; tests and embedding applications may pass their own.
Every failure here is an IdentityError, which WriteOptions treats as recoverable.

Interface:

	LoginUser.Get(configuration): the process-wide login name, resolved once and cached.
	LoginUser.Clear(): forget the cached login.
	GetPrimaryGroupName(user): the name of user's primary group.
	IdentityProvider: GetUserAndGroup(configuration) -> (user, group).
	LoginIdentityProvider: the IdentityProvider backed by LoginUser and the local group database.

TODOs/FIXMEs:
None.
"""

import getpass
import logging
import threading

from ..Constants import *
from ..Errors import *
from .AuthType import *

# The login is shared by every write in this process.
# NOTE: The first successful login wins; later configurations don't change it until Clear() is called.
class LoginUser(object):
	user = None
	lock = threading.Lock()

	@classmethod
	def Get(cls, configuration):
		with cls.lock:
			if (cls.user is None):
				cls.user = cls.Login(configuration)
				logging.debug(f"Logged in as {cls.user}")
			return cls.user

	@classmethod
	def Clear(cls):
		with cls.lock:
			cls.user = None

	# Determine the login name without caching it.
	# An explicitly configured user name takes precedence over the operating system user.
	@staticmethod
	def Login(configuration):
		authType = configuration.GetEnum(SECURITY_AUTHENTICATION_TYPE, AuthType)
		if (authType not in (AuthType.SIMPLE, AuthType.CUSTOM)):
			raise IdentityError(f"login is not supported for authentication type {authType}")

		name = configuration.Get(SECURITY_LOGIN_USERNAME, None)
		if (name):
			return name

		try:
			return getpass.getuser()
		except (KeyError, OSError, ImportError) as e:
			raise IdentityError(f"could not determine the operating system user: {e}") from e


def GetPrimaryGroupName(user):
	try:
		import pwd
		import grp
	except ImportError as e:
		raise IdentityError(f"group lookup is not supported on this platform: {e}") from e

	try:
		gid = pwd.getpwnam(user).pw_gid
		return grp.getgrgid(gid).gr_name
	except KeyError as e:
		raise IdentityError(f"no primary group found for user {user}") from e


class IdentityProvider(object):

	# RETURNS (user, group) for files created by this client.
	# Raise IOError (e.g. IdentityError) if they can't be determined.
	def GetUserAndGroup(this, configuration):
		raise NotImplementedError(f"{type(this).__name__} does not implement GetUserAndGroup")


class LoginIdentityProvider(IdentityProvider):

	def GetUserAndGroup(this, configuration):
		user = LoginUser.Get(configuration)
		return user, GetPrimaryGroupName(user)
