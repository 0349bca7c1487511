"""
File Copy FS Operation
----------------------

Purpose:
	Implements file:copy(file.path, destination.path). This FSOp copies a file from a source
	uri into a destination directory and returns True once the copy is complete.

Role in Architecture:
	- Checks the number and declared types of its arguments once, when it is built.
	- Resolves the destination file as <destination.path>/<base name of file.path>.
	- Hands the transfer to a VfsConnection and blocks on a fresh VfsCallback until the
	  connection reports back, or until wait_timeout seconds have passed.

Interface:
	- Construction: FileCopy(argumentTypes, connection=None, wait_timeout=5)
	- Copy(sourceUri, destinationDir, callback=None) -> True
	- Through eons: op(file_path=..., destination_path=...)
	- Raises:
		* ConfigurationError: wrong arity, argument types or settings (at construction).
		* InvalidURIError: malformed uri, or no file name can be derived from file.path.
		* BackendTransferError: the connection reported a failure.
		* InterruptedOperationError: the callback was interrupted while waiting.
		* TransferTimeoutError: no result within wait_timeout.

	Copying is not idempotent: calling Copy twice copies twice and the last write wins.
"""

import logging
from urllib.parse import quote

from ...common.FSOp import FSOp
from ...common.ProcessStates import CopyState
from ....Exceptions import *
from ....Upath import UniversalPath
from ....Utils import ujoin, parse_timeout
from ....vfs.VfsCallback import VfsCallback
from ....vfs.VfsConnection import VfsConnection
from ....vfs.VfsRequest import VfsRequest, ACTION_COPY

# Seconds to wait for the vfs-client before giving up.
DEFAULT_WAIT_TIMEOUT = 5

class FileCopy(FSOp):

	namespace = "file"
	functionName = "copy"
	description = "This function performs copying file from a particular source to a destination."

	parameters = [
		("file.path", "The file path of the source file to be copied.", str),
		("destination.path", "The file path of the destination folder of the file to be copied.", str),
	]

	returnType = bool

	def __init__(this, argumentTypes, connection=None, wait_timeout=DEFAULT_WAIT_TIMEOUT, name="file:copy"):
		super().__init__(name)

		this.ValidateArgumentTypes(argumentTypes)

		this.arg.kw.required.append('file_path')
		this.arg.kw.required.append('destination_path')

		this.arg.kw.optional["wait_timeout"] = wait_timeout

		this.wait_timeout = this.ParseWaitTimeout(wait_timeout)

		# The connection may be shared by concurrent calls; callbacks never are.
		if (connection is None):
			connection = VfsConnection()
		this.vfs = connection

	# eons.Functor method. See that class for more information.
	def ValidateArgs(this):
		super().ValidateArgs()
		this.wait_timeout = this.ParseWaitTimeout(this.wait_timeout)

	def Function(this):
		return this.Copy(this.file_path, this.destination_path)

	@staticmethod
	def ParseWaitTimeout(value):
		try:
			return parse_timeout(value)
		except (TypeError, ValueError) as e:
			raise ConfigurationError(f"error: wait_timeout {value} is not a valid timeout") from e

	# Copy sourceUri into destinationDir.
	# Pass your own callback if you need to Interrupt() the wait from another thread.
	# RETURNS True once the file has been copied.
	def Copy(this, sourceUri, destinationDir, callback=None):
		if (callback is None):
			callback = VfsCallback()

		try:
			callback.SetState(CopyState.VALIDATING)
			source = this.ValidateUri(sourceUri, "source")
			this.ValidateUri(destinationDir, "destination")

			callback.SetState(CopyState.RESOLVING)
			destination = this.ConstructPath(destinationDir, this.GetFileName(source))
			if (destination is None):
				raise InvalidURIError(f"Could not determine the destination for '{sourceUri}' in '{destinationDir}'.", sourceUri)

			callback.SetState(CopyState.TRANSFERRING)
			logging.debug(f"Copying {sourceUri} to {destination}")
			this.vfs.Send(VfsRequest(ACTION_COPY, sourceUri, destination), callback)

			callback.SetState(CopyState.AWAITING)
			callback.WaitTillDone(this.wait_timeout, sourceUri)

		except TransferTimeoutError as e:
			callback.SetState(CopyState.TIMED_OUT)
			logging.error(str(e))
			raise

		except ConnectorError as e:
			callback.SetState(CopyState.ERROR)
			logging.error(f"Failure occurred in vfs-client while copying the file {sourceUri}: {e}")
			raise BackendTransferError(f"Failure occurred in vfs-client while copying the file {sourceUri}", sourceUri) from e

		except FileCopyError:
			callback.SetState(CopyState.ERROR)
			raise

		callback.SetState(CopyState.COMPLETE)
		return True

	# RETURNS the uri as a UniversalPath.
	# Raises InvalidURIError naming the offending value.
	def ValidateUri(this, uri, role):
		try:
			return UniversalPath(uri)
		except InvalidURIError as e:
			raise InvalidURIError(f"In '{this.GetSignature()}', provided uri for {role} '{uri}' is invalid.", uri) from e

	# RETURNS the base name of upath, or None if it has none.
	def GetFileName(this, upath):
		name = upath.GetBaseName()
		if (name is None):
			logging.warning(f"Failed to extract file name from the uri '{upath}'.")
		return name

	# Join a destination directory and a plain file name.
	# The name is percent-encoded when the directory is a uri.
	@staticmethod
	def ConstructPath(baseUri, fileName):
		if (baseUri is None or fileName is None):
			return None
		if (UniversalPath(baseUri).scheme):
			fileName = quote(fileName)
		return ujoin(baseUri, fileName)
