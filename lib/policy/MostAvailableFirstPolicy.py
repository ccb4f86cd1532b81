from .LocationPolicy import *

# Send the block to the worker with the most free space.
# Stateless, so all instances are equal.
class MostAvailableFirstPolicy(LocationPolicy, aliases=["most_available_first"]):

	def GetWorkerForNextBlock(this, workerInfoList, blockSizeBytes):
		ret = None
		mostAvailableBytes = -1
		for workerInfo in workerInfoList:
			if (workerInfo.GetAvailableBytes() > mostAvailableBytes):
				mostAvailableBytes = workerInfo.GetAvailableBytes()
				ret = workerInfo.GetNetAddress()
		return ret

	def __eq__(this, other):
		if (not isinstance(other, MostAvailableFirstPolicy)):
			return NotImplemented
		return True

	def __hash__(this):
		return hash(MostAvailableFirstPolicy)
