import os

from StandardTestFixture import StandardTestFixture

from librivercopy import UniversalPath, InvalidURIError


class TestUniversalPath(StandardTestFixture):

	def test_bare_path(this):
		upath = UniversalPath("/a/b/c.txt")
		this.assert_equal(upath.GetProtocol(), "")
		this.assert_equal(upath.GetBaseName(), "c.txt")
		this.assert_equal(upath.AsPath(), os.path.normpath("/a/b/c.txt"))
		this.assert_equal(str(upath), "/a/b/c.txt")

	def test_bare_path_keeps_query_characters(this):
		upath = UniversalPath("/a/b/what?.txt")
		this.assert_equal(upath.GetBaseName(), "what?.txt")

	def test_file_uri(this):
		upath = UniversalPath("file:///a/b/my%20file.txt")
		this.assert_equal(upath.GetProtocol(), "file:")
		this.assert_equal(upath.GetBaseName(), "my file.txt")
		this.assert_equal(upath.AsPath(), os.path.normpath("/a/b/my file.txt"))

	def test_windows_drive_is_not_a_protocol(this):
		upath = UniversalPath("C:\\data\\report.csv")
		this.assert_equal(upath.GetProtocol(), "")
		this.assert_equal(upath.GetBaseName(), "report.csv")

	def test_copy_constructor(this):
		upath = UniversalPath(UniversalPath("file:///a/b.txt"))
		this.assert_equal(upath.GetBaseName(), "b.txt")
		this.assert_equal(upath.scheme, "file")

	def test_no_base_name(this):
		for uri in ("/a/b/", "file:///a/b/", "/a/b/.."):
			this.assert_equal(UniversalPath(uri).GetBaseName(), None)

	def test_invalid(this):
		for uri in ("", "   ", None, 42, "http://[::1/a", "file:", "a\x00b"):
			err = this.assert_raises(InvalidURIError, UniversalPath, uri)
			this.assert_equal(err.uri, uri)
