# Where a block worker can be reached.
class WorkerNetAddress(object):
	def __init__(this, host="", rpcPort=0, dataPort=0, webPort=0):
		this.host = host
		this.rpcPort = rpcPort
		this.dataPort = dataPort
		this.webPort = webPort

	def __eq__(this, other):
		if (not isinstance(other, WorkerNetAddress)):
			return NotImplemented
		return (this.host, this.rpcPort, this.dataPort, this.webPort) == (other.host, other.rpcPort, other.dataPort, other.webPort)

	def __hash__(this):
		return hash((this.host, this.rpcPort, this.dataPort, this.webPort))

	def __str__(this):
		return f"WorkerNetAddress{{host={this.host}, rpcPort={this.rpcPort}, dataPort={this.dataPort}, webPort={this.webPort}}}"

	__repr__ = __str__


# What a location policy knows about a block worker when choosing where the next block goes.
class BlockWorkerInfo(object):
	def __init__(this, address, capacityBytes, usedBytes=0):
		this.address = address
		this.capacityBytes = capacityBytes
		this.usedBytes = usedBytes

	def GetNetAddress(this):
		return this.address

	def GetCapacityBytes(this):
		return this.capacityBytes

	def GetUsedBytes(this):
		return this.usedBytes

	def GetAvailableBytes(this):
		return this.capacityBytes - this.usedBytes

	def __str__(this):
		return f"BlockWorkerInfo{{address={this.address}, capacityBytes={this.capacityBytes}, usedBytes={this.usedBytes}}}"

	__repr__ = __str__
