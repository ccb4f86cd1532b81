"""
lib/policy/LocationPolicy.py

Purpose:
The capability every block location policy implements: choose which worker receives the next block of a file being written.

Place in Architecture:
WriteOptions holds one LocationPolicy, built by name from configuration (see Registry.py).
Only the write path calls GetWorkerForNextBlock(); resolving options never does.

Interface:

	GetWorkerForNextBlock(workerInfoList, blockSizeBytes): RETURNS a WorkerNetAddress or None if no worker fits.
	Create(name), RegisterFactory(name, factory), from Registrable.

TODOs/FIXMEs:
None.
"""

from ..Registry import *
from .WorkerInfo import *

# Subclasses can be built by their class name (or aliases) once defined.
# A policy must be constructible with no arguments to be usable from configuration.
# NOTE: Policies are not thread safe. Each WriteOptions owns its own instance.
class LocationPolicy(Registrable, capability=True):

	# Override this in your child class.
	def GetWorkerForNextBlock(this, workerInfoList, blockSizeBytes):
		raise NotImplementedError(f"{type(this).__name__} does not implement GetWorkerForNextBlock")

	def __str__(this):
		return f"{type(this).__name__}{{}}"

	def __repr__(this):
		return str(this)
