"""
lib/vfs/VfsConnection.py

Purpose:
Provides a VFS client connector for local storage. It accepts requests keyed by an action, performs them on worker threads and reports the outcome through a VfsCallback.

Place in Architecture:
The transfer backend behind the FSOps. FSOps only ever call Send(request, callback) and then wait on the callback; everything about how bytes move lives here.

Interface:

	__init__(max_connections=10, chunk_size=65536): Sets the number of concurrent transfers and the copy block size.
	Send(request, callback): Validates the request and starts it in the background. Raises ConnectorError if the request can never succeed.
	Wait(timeout=None): Joins all running transfers (used on shutdown and in tests).
	Internal methods: _start(), _forget(), _acquire(), _transfer(), _run(), _copy().
	Requests wait for one of max_connections on their worker thread, never in Send.

TODOs/FIXMEs:
Only bare paths and file: uris are supported; other protocols need their own connection.
"""

import os
import shutil
import tempfile
import threading
import logging

from ..Exceptions import ConnectorError, InvalidURIError
from ..Upath import UniversalPath
from ..Utils import parse_count
from .VfsRequest import ACTION_COPY, SUPPORTED_ACTIONS

SUPPORTED_SCHEMES = ["", "file"]
LOCAL_HOSTS = ["", "localhost"]

# Seconds between cancellation checks while a request waits for a free connection.
SLOT_POLL_INTERVAL = 0.1

class VfsConnection(object):
	def __init__(this, max_connections=10, chunk_size=65536):
		this.max_connections = parse_count(max_connections)
		this.chunk_size = parse_count(chunk_size)

		this.transfers = []
		this.lock = threading.Lock()
		this.semaphore = threading.Semaphore(this.max_connections)

	# Start request in the background. callback.Done() will be called exactly once when it finishes.
	def Send(this, request, callback):
		if (request.action not in SUPPORTED_ACTIONS):
			raise ConnectorError(f"unsupported vfs action '{request.action}'")

		source = this._local(request.uri)
		destination = this._local(request.destination)

		logging.debug(f"vfs-client {request.action}: {source} -> {destination}")
		this._start(request, callback, source, destination)

	# Join running transfers.
	# RETURNS True if none are left running.
	def Wait(this, timeout=None):
		with this.lock:
			transfers = list(this.transfers)
		for transfer in transfers:
			transfer.join(timeout)
		return not any(transfer.is_alive() for transfer in transfers)

	def _local(this, uri):
		if (uri is None):
			raise ConnectorError("no uri provided")

		try:
			upath = UniversalPath(uri)
		except InvalidURIError as e:
			raise ConnectorError(f"invalid uri '{uri}'") from e

		if (upath.scheme not in SUPPORTED_SCHEMES):
			raise ConnectorError(f"unsupported protocol '{upath.scheme}' in '{uri}'")
		if (upath.netloc not in LOCAL_HOSTS):
			raise ConnectorError(f"remote host '{upath.netloc}' in '{uri}' is not supported")

		return upath.AsPath()

	def _start(this, request, callback, source, destination):
		transfer = threading.Thread(
			target=this._transfer,
			args=(request, callback, source, destination),
			name=f"vfs-{request.action}",
			daemon=True
		)

		with this.lock:
			this.transfers.append(transfer)
		try:
			transfer.start()
		except BaseException:
			this._forget(transfer)
			raise

	def _forget(this, transfer):
		with this.lock:
			if (transfer in this.transfers):
				this.transfers.remove(transfer)

	# Wait for a free connection on the worker thread, so the caller only ever blocks on its callback.
	# RETURNS False if the request was cancelled before a connection freed up.
	def _acquire(this, callback):
		while (not this.semaphore.acquire(timeout=SLOT_POLL_INTERVAL)):
			if (callback.IsCancelled()):
				return False
		return True

	def _transfer(this, request, callback, source, destination):
		try:
			if (not this._acquire(callback)):
				logging.debug(f"vfs-client {request.action} of {request.uri} cancelled while queued")
				callback.Done(ConnectorError(f"{request.action} of {request.uri} was cancelled before it started"))
				return

			try:
				this._run(request, callback, source, destination)
			finally:
				this.semaphore.release()
		finally:
			this._forget(threading.current_thread())

	def _run(this, request, callback, source, destination):
		try:
			if (request.action == ACTION_COPY):
				this._copy(callback, source, destination)
		except (IOError, OSError) as e:
			if (not isinstance(e, ConnectorError)):
				e = ConnectorError(f"failed to {request.action} {request.uri}: {e}")
			logging.error(f"vfs-client error: {e}")
			callback.Done(e)
		except Exception as e:
			logging.error(f"vfs-client error: {e}")
			callback.Done(ConnectorError(f"failed to {request.action} {request.uri}: {e}"))
		else:
			logging.debug(f"vfs-client {request.action} finished: {destination}")
			callback.Done()

	# Copy source to destination through a temporary file in the destination's directory.
	# The destination only appears once all the data is there.
	def _copy(this, callback, source, destination):
		if (not os.path.isfile(source)):
			raise ConnectorError(f"source file {source} does not exist")
		if (os.path.isdir(destination)):
			raise ConnectorError(f"destination {destination} is a directory")

		directory = os.path.dirname(destination) or "."
		os.makedirs(directory, exist_ok=True)

		fd, tmp = tempfile.mkstemp(prefix=".vfs-", suffix=".part", dir=directory)
		try:
			with open(source, 'rb') as src, os.fdopen(fd, 'wb') as dst:
				while True:
					if (callback.IsCancelled()):
						raise ConnectorError(f"copy of {source} was cancelled")
					block = src.read(this.chunk_size)
					if (not block):
						break
					dst.write(block)
			shutil.copymode(source, tmp)
			os.replace(tmp, destination)
		except BaseException:
			if (os.path.exists(tmp)):
				os.unlink(tmp)
			raise
