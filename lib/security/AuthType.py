from enum import Enum

from ..Constants import *

# How clients identify themselves.
# With NOSASL there is no login, so new files keep the default (empty) owner.
class AuthType(Enum):
	NOSASL = 1
	SIMPLE = 2
	CUSTOM = 3

	def __str__(this):
		return this.name


def IsAuthenticationEnabled(configuration):
	return configuration.GetEnum(SECURITY_AUTHENTICATION_TYPE, AuthType) != AuthType.NOSASL
