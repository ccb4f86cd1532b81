"""
lib/Constants.py

Purpose:
Configuration keys, their built-in defaults and a few sentinel values.

Place in Architecture:
Read by Configuration (for defaults) and by WriteOptions / Permission (for key names).

TODOs/FIXMEs:
None.
"""

# Configuration keys
USER_BLOCK_SIZE_BYTES_DEFAULT = "river.user.block.size.bytes.default"
USER_FILE_WRITE_TYPE_DEFAULT = "river.user.file.writetype.default"
USER_FILE_WRITE_LOCATION_POLICY = "river.user.file.write.location.policy.class"
SECURITY_AUTHORIZATION_PERMISSION_UMASK = "river.security.authorization.permission.umask"
SECURITY_AUTHENTICATION_TYPE = "river.security.authentication.type"
SECURITY_LOGIN_USERNAME = "river.security.login.username"

# Values used when nothing else is configured.
# Sizes and masks are kept as strings, the same way they'd arrive from a file or the environment.
DEFAULTS = {
	USER_BLOCK_SIZE_BYTES_DEFAULT: "512MiB",
	USER_FILE_WRITE_TYPE_DEFAULT: "MUST_CACHE",
	USER_FILE_WRITE_LOCATION_POLICY: "LocalFirstPolicy",
	SECURITY_AUTHORIZATION_PERMISSION_UMASK: "022",
	SECURITY_AUTHENTICATION_TYPE: "SIMPLE",
}

# TTL meaning "never delete this file".
NO_TTL = -1

# Mode of a freshly created object, before any umask.
DEFAULT_FS_FULL_PERMISSION = 0o777

# Files never get the execute bits.
FILE_UMASK = 0o111

# Largest value a umask may have.
MAX_UMASK = 0o777
