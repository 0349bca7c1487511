"""
lib/Exceptions.py

Purpose:
Defines the errors raised while copying files through a VFS connection.

Place in Architecture:
Shared by the FSOps (e.g. file:copy) and the VFS layer. Configuration problems are eons argument errors; everything that can go wrong during a call is an IOError carrying an errno and the offending uri.

Interface:

	ConfigurationError: bad arity / argument types / settings, detected once at setup.
	FileCopyError: base of all call-time failures.
	InvalidURIError, BackendTransferError, InterruptedOperationError, TransferTimeoutError.
	ConnectorError: raised by the VFS connection itself.

TODOs/FIXMEs:
None.
"""

import eons
import errno


# Raised when an FSOp is set up with the wrong number or kind of arguments, or with invalid settings.
# These are fatal to the call site and never retried.
class ConfigurationError(eons.MissingArgumentError):
	pass


class FileCopyError(IOError):
	def __init__(this, code, message, uri=None):
		super().__init__(code, message)
		this.uri = uri


class InvalidURIError(FileCopyError):
	def __init__(this, message, uri=None):
		super().__init__(errno.EINVAL, message, uri)


class BackendTransferError(FileCopyError):
	def __init__(this, message, uri=None):
		super().__init__(errno.EREMOTEIO, message, uri)


class InterruptedOperationError(FileCopyError, InterruptedError):
	def __init__(this, message, uri=None):
		super().__init__(errno.EINTR, message, uri)


class TransferTimeoutError(FileCopyError, TimeoutError):
	def __init__(this, message, uri=None):
		super().__init__(errno.ETIMEDOUT, message, uri)


# Failures inside the VFS connection (unsupported request, I/O error, cancellation).
# FSOps wrap these in a BackendTransferError.
class ConnectorError(IOError):
	pass
