"""
lib/RedisConfiguration.py

Purpose:
A Configuration whose values live in Redis, so every client in a multi-server deployment resolves the same defaults.

Place in Architecture:
Drop-in replacement for Configuration. Locally Set() values still win; keys missing from Redis fall back to the built-in defaults.

Interface:

	__init__(values=None, redis_host="127.0.0.1", redis_port=6379, redis_db=0, prefix="river:conf:", client=None)
	Lookup(key): local value, then Redis, then default.
	GetRedisValue(key) / SetRedisValue(key, value): low-level access.

TODOs/FIXMEs:
None.
"""

import logging
import redis

from .Configuration import *

class RedisConfiguration(Configuration):
	def __init__(this, values=None, redis_host="127.0.0.1", redis_port=6379, redis_db=0, prefix="river:conf:", client=None):
		super().__init__(values)

		this.prefix = prefix

		# Connections are made lazily by the redis client, so this doesn't block.
		if (client is None):
			client = redis.Redis(host=redis_host, port=redis_port, db=redis_db)
		this.redis = client


	def Lookup(this, key):
		if (key in this.values):
			return this.values[key]

		ret = this.GetRedisValue(key)
		if (ret is not None):
			return ret

		return this.defaults.get(key)


	# Get a configuration value from Redis.
	# RETURNS the value as a string or None if it is not set or there was an error.
	def GetRedisValue(this, key):
		try:
			ret = this.redis.get(f"{this.prefix}{key}")
		except (redis.RedisError, OSError) as e:
			logging.error(f"Error getting configuration value for {key}: {e}")
			return None

		if (isinstance(ret, bytes)):
			ret = ret.decode('utf-8')
		return ret


	# Publish a configuration value for every client reading from the same Redis.
	# RETURNS True if the value was set, False otherwise.
	def SetRedisValue(this, key, value):
		try:
			this.redis.set(f"{this.prefix}{key}", str(value))
			return this.GetRedisValue(key) == str(value)
		except (redis.RedisError, OSError) as e:
			logging.error(f"Error setting configuration value for {key} to {value}: {e}")
			return False
