"""
lib/fs/common/FSOp.py

Purpose:
Defines the base class for File System Operations (FSOps). Each FSOp represents a single operation (e.g. copy) exposed to a query engine as a function like file:copy(...).

Place in Architecture:
Serves as the foundation for all stateless FS operations. Concrete FSOps declare their parameters and return type as class members and inherit the construction-time argument check from here.

Interface:

	Inherits from eons.Functor.
	namespace, parameters, returnType: class level description of the function.
	GetSignature(): Returns e.g. "file:copy()".
	ValidateArgumentTypes(argumentTypes): Checks the declared types of the caller's arguments; raises ConfigurationError.

TODOs/FIXMEs:
None.
"""


import eons
from ...Exceptions import ConfigurationError

ORDINALS = ["first", "second", "third", "fourth", "fifth"]

# An FSOp, or File System Operation, is a Functor which performs a single operation on a file system.
# For example, copying a file from one location to another.
# All FSOps should be:
# - Stateless: They should not store any per call state, and should not have any in-memory side effects.
# - Bound once: The number and types of the caller's arguments are checked when the FSOp is built, not on every call.
# - Scalable: Multiple calls should be able to run in parallel without interfering with each other.
class FSOp(eons.Functor):

	namespace = ""
	functionName = ""

	# (name, description, type) for each parameter, in order.
	parameters = []

	returnType = None

	def __init__(this, name=eons.INVALID_NAME()):
		super().__init__(name)

	@classmethod
	def GetSignature(cls):
		name = cls.functionName or cls.__name__
		if (cls.namespace):
			return f"{cls.namespace}:{name}()"
		return f"{name}()"

	# Check the declared types of the arguments the caller will pass.
	# argumentTypes is a sequence of python types, one per argument expression.
	def ValidateArgumentTypes(this, argumentTypes):
		argumentTypes = list(argumentTypes)
		signature = this.GetSignature()

		if (len(argumentTypes) != len(this.parameters)):
			raise ConfigurationError(f"Invalid no of arguments passed to {signature} function, required {len(this.parameters)}, but found {len(argumentTypes)}")

		for i, (expected, found) in enumerate(zip(this.parameters, argumentTypes)):
			paramName, _, paramType = expected
			if (found is not paramType):
				ordinal = ORDINALS[i] if i < len(ORDINALS) else f"#{i + 1}"
				raise ConfigurationError(f"Invalid parameter type found for the {paramName} ({ordinal} argument) of {signature} function, required {paramType.__name__}, but found {getattr(found, '__name__', found)}")
