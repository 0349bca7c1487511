"""
lib/fs/common/ProcessStates.py

Purpose:
Defines an enumeration of the states a single copy call passes through.

Place in Architecture:
Tracked by the file:copy FSOp so that the progress (and outcome) of a call can be logged and inspected.

Interface:

	Enum members: VALIDATING, RESOLVING, TRANSFERRING, AWAITING, COMPLETE, ERROR and TIMED_OUT.
	IsFinal(): True for the terminal states.

TODOs/FIXMEs:
None.
"""

from enum import Enum

# Every call starts at VALIDATING and ends in exactly one of COMPLETE, ERROR or TIMED_OUT.
# Nothing is carried over between calls.
class CopyState(Enum):
	VALIDATING = 0
	RESOLVING = 1
	TRANSFERRING = 2
	AWAITING = 3
	COMPLETE = 4
	ERROR = 5
	TIMED_OUT = 6

	def IsFinal(self):
		return self in (CopyState.COMPLETE, CopyState.ERROR, CopyState.TIMED_OUT)

	def __str__(self):
		return self.name
