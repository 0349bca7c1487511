"""
lib/Upath.py

Purpose:
Implements a universal path class that understands both bare file system paths and URL-qualified paths (scheme + path).

Place in Architecture:
Used by the FSOps to validate the uris they are given and to derive file names, and by the VFS connection to turn a uri back into a local system path.

Interface:

	__init__(uri): Parses a string (or another UniversalPath). Raises InvalidURIError if the uri is malformed.
	__str__(): Returns the uri as it was given.
	GetProtocol(): Returns the protocol segment (e.g. "file:") or "" for a bare path.
	GetBaseName(): Returns the last path segment as a plain (percent-decoded) file name, or None if there is none.
	AsPath(): Returns the uri as a local system path.

TODOs/FIXMEs:
None noted.
"""

import os
from urllib.parse import urlsplit, unquote

from .Exceptions import InvalidURIError
from .Utils import ubasename

class UniversalPath:
	def __init__(this, uri=""):
		if (isinstance(uri, UniversalPath)):
			this.uri = uri.uri
			this.scheme = uri.scheme
			this.netloc = uri.netloc
			this.path = uri.path
		else:
			this.FromUri(uri)

	def __str__(this):
		return this.uri

	def FromUri(this, uri):
		if (not isinstance(uri, str) or not uri.strip()):
			raise InvalidURIError(f"provided uri '{uri}' is invalid.", uri)
		if ('\x00' in uri):
			raise InvalidURIError(f"provided uri '{uri}' contains a null byte.", uri)

		try:
			parts = urlsplit(uri)
		except ValueError as e:
			raise InvalidURIError(f"provided uri '{uri}' is invalid: {e}", uri) from e

		this.uri = uri

		# A single letter scheme is a windows drive (e.g. C:\), not a protocol.
		if (len(parts.scheme) == 1):
			this.scheme = ""
			this.netloc = ""
			this.path = uri.replace('\\', '/')
			return

		this.scheme = parts.scheme.lower()
		this.netloc = parts.netloc
		this.path = parts.path
		if (not this.scheme):
			# Keep bare paths verbatim; urlsplit would drop anything after '?' or '#'.
			this.path = uri.replace(os.sep, '/')

		if (this.scheme and not this.path):
			raise InvalidURIError(f"provided uri '{uri}' has no path.", uri)

	def GetProtocol(this):
		if (not this.scheme):
			return ""
		return f"{this.scheme}:"

	# The name is decoded for uris, so it is always a plain file name.
	def GetBaseName(this):
		name = ubasename(this.path)
		if (this.scheme):
			name = unquote(name)
		if (not name or name in ('.', '..')):
			return None
		return name

	def AsPath(this):
		if (this.scheme):
			return os.path.normpath(unquote(this.path))
		return os.path.normpath(this.uri)
