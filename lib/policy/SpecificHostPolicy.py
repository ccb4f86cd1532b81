from .LocationPolicy import *

# Always write to the worker on the given host.
# Requires a host name, so it can be set on WriteOptions directly but not named in configuration.
class SpecificHostPolicy(LocationPolicy):
	def __init__(this, hostname):
		this.hostname = hostname

	def GetWorkerForNextBlock(this, workerInfoList, blockSizeBytes):
		for workerInfo in workerInfoList:
			if (workerInfo.GetNetAddress().host == this.hostname):
				return workerInfo.GetNetAddress()
		return None

	def __eq__(this, other):
		if (not isinstance(other, SpecificHostPolicy)):
			return NotImplemented
		return this.hostname == other.hostname

	def __hash__(this):
		return hash((SpecificHostPolicy, this.hostname))

	def __str__(this):
		return f"SpecificHostPolicy{{hostname={this.hostname}}}"
