"""
lib/vfs/VfsCallback.py

Purpose:
The completion signal for a single VFS request. The connection signals it exactly once (success or failure); the caller waits on it.

Place in Architecture:
Created fresh for every FSOp call and handed to VfsConnection.Send. It is never shared between calls.

Interface:

	Done(error=None): Called by the connection when the request finished. Only the first call counts.
	Interrupt(): Wakes the waiting caller with an InterruptedOperationError.
	Cancel() / IsCancelled(): Ask the connection to abandon the transfer.
	WaitTillDone(timeout, uri): Blocks until signaled, interrupted, or the timeout elapses.
	state: The CopyState of the call that owns *this.

TODOs/FIXMEs:
None.
"""

import threading
import logging

from ..Exceptions import ConnectorError, InterruptedOperationError, TransferTimeoutError
from ..fs.common.ProcessStates import CopyState

class VfsCallback(object):
	def __init__(this):
		this.lock = threading.Lock()
		this.event = threading.Event()
		this.cancelled = threading.Event()

		this.done = False
		this.error = None
		this.interrupted = False

		this.state = CopyState.VALIDATING

	def SetState(this, state):
		logging.debug(f"Copy state: {this.state} -> {state}")
		this.state = state

	def Done(this, error=None):
		with this.lock:
			if (this.done or this.interrupted):
				logging.debug(f"Ignoring repeated completion signal (error: {error})")
				return False
			this.done = True
			this.error = error
		this.event.set()
		return True

	def Interrupt(this):
		with this.lock:
			if (this.done):
				return False
			this.interrupted = True
		this.cancelled.set()
		this.event.set()
		return True

	def Cancel(this):
		this.cancelled.set()

	def IsCancelled(this):
		return this.cancelled.is_set()

	# Block until the connection signals *this.
	# RETURNS True on success.
	# Raises ConnectorError if the connection reported a failure, InterruptedOperationError if Interrupt() was called, and TransferTimeoutError if nothing happened within timeout seconds.
	def WaitTillDone(this, timeout, uri):
		try:
			signaled = this.event.wait(timeout)
		except BaseException:
			# e.g. KeyboardInterrupt; don't leave the transfer running.
			this.Cancel()
			raise

		if (not signaled):
			this.Cancel()
			raise TransferTimeoutError(f"Timed out after {timeout} seconds waiting for the vfs-client to finish with {uri}", uri)

		if (this.interrupted):
			raise InterruptedOperationError(f"Failed to get callback from vfs-client for file {uri}", uri)

		if (this.error is not None):
			if (isinstance(this.error, ConnectorError)):
				raise this.error
			raise ConnectorError(f"vfs-client failed for {uri}: {this.error}") from this.error

		return True
