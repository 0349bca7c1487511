ACTION_COPY = "copy"

SUPPORTED_ACTIONS = [ACTION_COPY]


# A single request to the VFS connection: what to do, to which uri, and where the result goes.
class VfsRequest(object):
	def __init__(this, action, uri, destination=None):
		this.action = action
		this.uri = uri
		this.destination = destination

	def __repr__(this):
		return f"VfsRequest({this.action}, {this.uri} -> {this.destination})"
