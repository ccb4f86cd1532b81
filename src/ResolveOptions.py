"""
src/ResolveOptions.py

Purpose:
Command line tool that prints the write options a client would use, given its configuration and any overrides.

Place in Architecture:
Thin wrapper around libriverwrite.WriteOptions.Defaults(). Useful for checking a deployment's configuration before mounting.

Interface:

	riverwrite-options [-c CONFIG] [-e] [-b SIZE] [-t TTL] [-w WRITE_TYPE] [-p POLICY] [-m UMASK] [-l LOG_LEVEL]

TODOs/FIXMEs:
None.
"""

import sys
import logging
import argparse

from libriverwrite import *

def BuildParser():
	parser = argparse.ArgumentParser(prog="riverwrite-options", description="Resolve the options used to write new files.")
	parser.add_argument('-c', '--config', dest='config', help="JSON configuration file")
	parser.add_argument('-e', '--env', dest='env', action="store_true", help="Read configuration from RIVER_* environment variables")
	parser.add_argument('-b', '--block-size', dest='block_size', help="Block size, e.g. 64MiB")
	parser.add_argument('-t', '--ttl', dest='ttl', help="Time to live (milliseconds) or 'inf'")
	parser.add_argument('-w', '--write-type', dest='write_type', help="One of " + ", ".join(w.name for w in WriteType))
	parser.add_argument('-p', '--location-policy', dest='location_policy', help="Registered location policy name")
	parser.add_argument('-m', '--umask', dest='umask', help="Umask for new files, in octal")
	parser.add_argument('-l', '--log-level', dest='log_level', default='warning',
						help="Log level (error, warning, info, debug). Default: warning")
	return parser


def SetupLogging(log_level):
	logger = logging.getLogger('')
	logger.setLevel(log_level)

	# Only install our handler once per process.
	if (any(getattr(h, "riverwrite", False) for h in logger.handlers)):
		return

	handler = logging.StreamHandler()
	fmt = logging.Formatter(fmt="%(asctime)s riverwrite[%(process)d]: %(levelname)s: %(message)s")
	handler.setFormatter(fmt)
	handler.riverwrite = True
	logger.addHandler(handler)


def LoadConfiguration(options):
	if (options.config):
		configuration = Configuration.FromJsonFile(options.config)
	elif (options.env):
		configuration = Configuration.FromEnvironment()
	else:
		configuration = Configuration()

	# Configuration-level overrides, so they go through the same parsing as any other source.
	if (options.location_policy):
		configuration.Set(USER_FILE_WRITE_LOCATION_POLICY, options.location_policy)
	if (options.umask):
		configuration.Set(SECURITY_AUTHORIZATION_PERMISSION_UMASK, options.umask)
	return configuration


def ApplyOverrides(writeOptions, options):
	if (options.block_size):
		try:
			writeOptions.SetBlockSizeBytes(parse_size(options.block_size))
		except ValueError:
			raise ConfigurationError("--block-size", f"{options.block_size!r} is not a valid size specifier")

	if (options.ttl):
		if (options.ttl.lower() in ('inf', 'infinity', 'infinite')):
			writeOptions.SetTtl(NO_TTL)
		else:
			try:
				writeOptions.SetTtl(int(options.ttl))
			except ValueError:
				raise ConfigurationError("--ttl", f"{options.ttl!r} is not a valid ttl")

	if (options.write_type):
		try:
			writeOptions.SetWriteType(WriteType[options.write_type.strip().upper()])
		except KeyError:
			raise ConfigurationError("--write-type", f"{options.write_type!r} is not a valid write type")

	return writeOptions


def Describe(writeOptions):
	lines = [
		str(writeOptions),
		f"storage type: {writeOptions.GetStorageType()}",
		f"under storage type: {writeOptions.GetUnderStorageType()}",
	]
	for warning in writeOptions.GetWarnings():
		lines.append(f"warning: {warning}")
	return "\n".join(lines)


def main(args=None):
	options = BuildParser().parse_args(args)

	try:
		log_level = parse_log_level(options.log_level)
	except ValueError:
		print(("error: --log-level %r is not a valid log level" % (options.log_level,)))
		return 1

	SetupLogging(log_level)

	try:
		configuration = LoadConfiguration(options)
		writeOptions = ApplyOverrides(WriteOptions.Defaults(configuration), options)
	except RiverWriteError as e:
		print(f"error: {e}")
		return 1

	print(Describe(writeOptions))
	return 0


if __name__ == '__main__':
	sys.exit(main())
