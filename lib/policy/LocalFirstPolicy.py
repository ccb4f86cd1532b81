import random
import socket

from .LocationPolicy import *

# Prefer the worker on this host. Otherwise, pick a random worker big enough for the block.
class LocalFirstPolicy(LocationPolicy, aliases=["local_first"]):
	def __init__(this, localHostName=None):
		if (localHostName is None):
			localHostName = socket.gethostname()
		this.localHostName = localHostName

	def GetWorkerForNextBlock(this, workerInfoList, blockSizeBytes):
		for workerInfo in workerInfoList:
			if (workerInfo.GetNetAddress().host == this.localHostName and workerInfo.GetCapacityBytes() >= blockSizeBytes):
				return workerInfo.GetNetAddress()

		shuffled = list(workerInfoList)
		random.shuffle(shuffled)
		for workerInfo in shuffled:
			if (workerInfo.GetCapacityBytes() >= blockSizeBytes):
				return workerInfo.GetNetAddress()

		return None

	def __eq__(this, other):
		if (not isinstance(other, LocalFirstPolicy)):
			return NotImplemented
		return this.localHostName == other.localHostName

	def __hash__(this):
		return hash((LocalFirstPolicy, this.localHostName))

	def __str__(this):
		return f"LocalFirstPolicy{{localHostName={this.localHostName}}}"
