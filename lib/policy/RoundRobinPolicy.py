import random

from .LocationPolicy import *

# Cycle through the workers, skipping those too small for the block.
# The worker order is shuffled once, on first use, so clients don't all start on the same worker.
# Equality is identity: two instances with the same cursor are still distinct cursors.
class RoundRobinPolicy(LocationPolicy, aliases=["round_robin"]):
	def __init__(this):
		this.workerInfoList = None
		this.index = 0

	def GetWorkerForNextBlock(this, workerInfoList, blockSizeBytes):
		workerInfoList = list(workerInfoList)
		if (this.workerInfoList is None):
			this.workerInfoList = list(workerInfoList)
			random.shuffle(this.workerInfoList)
			this.index = 0

		# At most, try every worker once.
		for i in range(len(this.workerInfoList)):
			candidate = this.workerInfoList[this.index].GetNetAddress()
			this.index = (this.index + 1) % len(this.workerInfoList)

			# Workers may have changed since we first saw them, so use the current info.
			current = next((w for w in workerInfoList if w.GetNetAddress() == candidate), None)
			if (current is not None and current.GetCapacityBytes() >= blockSizeBytes):
				return candidate

		return None

	def __str__(this):
		return f"RoundRobinPolicy{{index={this.index}}}"
