import os

from StandardTestFixture import StandardTestFixture

from librivercopy import *


class TestVfsCallback(StandardTestFixture):

	def test_success(this):
		callback = VfsCallback()
		assert callback.Done()
		this.assert_equal(callback.WaitTillDone(1, "/a.txt"), True)

	def test_signaled_once(this):
		callback = VfsCallback()
		assert callback.Done()
		assert not callback.Done(ConnectorError("late"))
		this.assert_equal(callback.WaitTillDone(1, "/a.txt"), True)

	def test_failure(this):
		callback = VfsCallback()
		callback.Done(ConnectorError("boom"))
		err = this.assert_raises(ConnectorError, callback.WaitTillDone, 1, "/a.txt")
		assert "boom" in str(err)

	def test_foreign_failure_is_wrapped(this):
		callback = VfsCallback()
		cause = PermissionError("denied")
		callback.Done(cause)
		err = this.assert_raises(ConnectorError, callback.WaitTillDone, 1, "/a.txt")
		assert err.__cause__ is cause

	def test_interrupt_after_done_is_ignored(this):
		callback = VfsCallback()
		callback.Done()
		assert not callback.Interrupt()
		this.assert_equal(callback.WaitTillDone(1, "/a.txt"), True)

	def test_timeout_cancels(this):
		callback = VfsCallback()
		this.assert_raises(TransferTimeoutError, callback.WaitTillDone, 0.05, "/a.txt")
		assert callback.IsCancelled()


class TestVfsConnection(StandardTestFixture):

	def test_unsupported_action(this):
		vfs = VfsConnection()
		request = VfsRequest("move", "/a.txt", "/b/a.txt")
		this.assert_raises(ConnectorError, vfs.Send, request, VfsCallback())

	def test_remote_host(this):
		vfs = VfsConnection()
		request = VfsRequest(ACTION_COPY, "file://example.com/a.txt", "/b/a.txt")
		this.assert_raises(ConnectorError, vfs.Send, request, VfsCallback())

	def test_missing_destination(this):
		vfs = VfsConnection()
		request = VfsRequest(ACTION_COPY, "/a.txt")
		this.assert_raises(ConnectorError, vfs.Send, request, VfsCallback())

	def test_invalid_settings(this):
		for kwargs in ({'max_connections': 0}, {'chunk_size': -1}, {'max_connections': "many"}):
			this.assert_raises(ValueError, VfsConnection, **kwargs)

	def test_copy(this):
		source = this.MakeSourceFile('vfs.txt', b"river")
		destination = os.path.join(this.NewDestination('vfs'), 'vfs.txt')

		vfs = VfsConnection()
		callback = VfsCallback()
		vfs.Send(VfsRequest(ACTION_COPY, source, destination), callback)
		this.assert_equal(callback.WaitTillDone(5, source), True)
		assert vfs.Wait(5)

		with open(destination, 'rb') as file:
			this.assert_equal(file.read(), b"river")

	def test_cancelled_copy_leaves_nothing_behind(this):
		source = this.MakeSourceFile('cancel.txt', b"x" * 10000)
		directory = this.NewDestination('cancel')
		destination = os.path.join(directory, 'cancel.txt')

		vfs = VfsConnection(chunk_size=16)
		callback = VfsCallback()
		callback.Cancel()
		vfs.Send(VfsRequest(ACTION_COPY, source, destination), callback)

		err = this.assert_raises(ConnectorError, callback.WaitTillDone, 5, source)
		assert "cancelled" in str(err)
		assert vfs.Wait(5)
		this.assert_equal(os.listdir(directory), [])

	def test_destination_is_a_directory(this):
		source = this.MakeSourceFile('dir.txt', b"x")
		destination = this.NewDestination('dir')
		os.makedirs(os.path.join(destination, 'dir.txt'))

		vfs = VfsConnection()
		callback = VfsCallback()
		vfs.Send(VfsRequest(ACTION_COPY, source, os.path.join(destination, 'dir.txt')), callback)
		this.assert_raises(ConnectorError, callback.WaitTillDone, 5, source)
