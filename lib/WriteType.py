"""
lib/WriteType.py

Purpose:
Enumerates how a new file is written: whether it is kept in the cache tier, and whether (and how) it is persisted to the under storage.

Place in Architecture:
WriteOptions holds a WriteType. The write path asks WriteOptions for the StorageType and UnderStorageType, which are always derived from the WriteType, never set on their own.

Interface:

	StorageType: STORE, NO_STORE, PROMOTE.
	UnderStorageType: SYNC_PERSIST, NO_PERSIST, ASYNC_PERSIST.
	WriteType: MUST_CACHE, TRY_CACHE, CACHE_THROUGH, THROUGH, ASYNC_THROUGH, NONE.
		GetStorageType(), GetUnderStorageType(), IsCache(), IsThrough(), IsAsync().

TODOs/FIXMEs:
None.
"""

from enum import Enum

# Whether data is kept in the cache tier.
class StorageType(Enum):
	STORE = 1 # Put the data in the cache tier.
	NO_STORE = 2 # Do not put the data in the cache tier.
	PROMOTE = 3 # Store, and move the data to the top tier. Only meaningful for reads.

	def IsStore(this):
		return this in (StorageType.STORE, StorageType.PROMOTE)

	def IsPromote(this):
		return this == StorageType.PROMOTE

	def __str__(this):
		return this.name


# Whether data is persisted to the under storage.
class UnderStorageType(Enum):
	SYNC_PERSIST = 1 # Persist before the write completes.
	NO_PERSIST = 2 # Never persist.
	ASYNC_PERSIST = 3 # Persist some time after the write completes.

	def IsSyncPersist(this):
		return this == UnderStorageType.SYNC_PERSIST

	def IsAsyncPersist(this):
		return this == UnderStorageType.ASYNC_PERSIST

	def IsPersist(this):
		return this != UnderStorageType.NO_PERSIST

	def __str__(this):
		return this.name


# A WriteType picks one StorageType and one UnderStorageType together.
# This is the only way to choose them, which rules out combinations the write path can't honor.
class WriteType(Enum):
	MUST_CACHE = 1 # Cache only. Fails if the cache tier has no room.
	TRY_CACHE = 2 # Cache only, best effort.
	CACHE_THROUGH = 3 # Cache and persist synchronously.
	THROUGH = 4 # Persist synchronously, skip the cache.
	ASYNC_THROUGH = 5 # Cache now, persist later.
	NONE = 6 # Neither cache nor persist.

	def IsCache(this):
		return this in (WriteType.MUST_CACHE, WriteType.TRY_CACHE, WriteType.CACHE_THROUGH, WriteType.ASYNC_THROUGH)

	def IsThrough(this):
		return this in (WriteType.CACHE_THROUGH, WriteType.THROUGH)

	def IsAsync(this):
		return this == WriteType.ASYNC_THROUGH

	def GetStorageType(this):
		if (this.IsCache()):
			return StorageType.STORE
		return StorageType.NO_STORE

	def GetUnderStorageType(this):
		if (this.IsThrough()):
			return UnderStorageType.SYNC_PERSIST
		if (this.IsAsync()):
			return UnderStorageType.ASYNC_PERSIST
		return UnderStorageType.NO_PERSIST

	def __str__(this):
		return this.name
