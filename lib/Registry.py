"""
lib/Registry.py

Purpose:
Lets a family of classes be built by name, so configuration can name an implementation without holding a reference to it.

Place in Architecture:
LocationPolicy is a capability root. Class names are resolved by eons.SelfRegistering, which only searches the subclasses of the capability it is asked on.
Aliases and explicitly registered factories are checked first.
Configuration.GetInstance() resolves a configured name through Create().

Interface:

	class Foo(Registrable, capability=True): declares a new capability with its own aliases and factories.
	class Bar(Foo, aliases=["bar"]): buildable as "Bar" and "bar".
	Foo.RegisterFactory(name, factory) / Foo.UnregisterFactory(name): any zero-argument callable.
	Foo.Create(name): builds the implementation known by name.

TODOs/FIXMEs:
None.
"""

import eons
import logging

from .Errors import *

class Registrable(eons.SelfRegistering):

	def __init_subclass__(cls, capability=False, aliases=(), **kwargs):
		super().__init_subclass__(**kwargs)

		if (capability):
			cls._aliases = {}
			cls._factories = {}
			return

		for alias in aliases:
			cls._aliases[alias] = cls


	# SelfRegistering.__new__ expects a class name to look up.
	# Registrable classes are looked up through Create(), so direct construction just builds the class asked for.
	def __new__(cls, *args, **kwargs):
		return object.__new__(cls)


	def __init__(this, *args, **kwargs):
		pass


	@classmethod
	def RegisterFactory(cls, name, factory):
		logging.debug(f"Registering {name} as a {cls.__name__}")
		cls._factories[name] = factory


	@classmethod
	def UnregisterFactory(cls, name):
		cls._factories.pop(name, None)
		cls._aliases.pop(name, None)


	# Find the factory for the given name: a registered factory, an alias, or a subclass named name.
	# Names are lookup keys only; nothing is imported.
	@classmethod
	def GetFactory(cls, name):
		if (name in cls._factories):
			return cls._factories[name]

		if (name in cls._aliases):
			return cls._aliases[name]

		try:
			return cls.GetClass(name)
		except eons.ClassNotFound as e:
			raise InstantiationError(name, f"no {cls.__name__} registered under that name") from e


	# Build a new instance of the implementation known by name.
	# Anything that goes wrong becomes an InstantiationError; there is no half-built result.
	# RETURNS the new instance.
	@classmethod
	def Create(cls, name):
		if (not isinstance(name, str) or not name.strip()):
			raise InstantiationError(name, f"not a valid {cls.__name__} name")
		name = name.strip()

		factory = cls.GetFactory(name)

		try:
			instance = factory()
		except Exception as e:
			raise InstantiationError(name, f"{type(e).__name__}: {e}") from e

		if (not isinstance(instance, cls)):
			raise InstantiationError(name, f"{type(instance).__name__} is not a {cls.__name__}")

		logging.debug(f"Created {cls.__name__} {name}")
		return instance
