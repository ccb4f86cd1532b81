import json
import pytest

from StandardTestFixture import StandardTestFixture

from libriverwrite import *


class TestParsing(StandardTestFixture):

	@pytest.mark.parametrize("value, expected", [
		("0", 0),
		("4096", 4096),
		("64MiB", 64 * 1024**2),
		("64 mib", 64 * 1024**2),
		("1GiB", 1024**3),
		("2kb", 2048),
		("3k", 3072),
		("64MB", 67108864),
		("512mb", 512 * 1024**2),
		("1T", 1024**4),
		(512, 512),
	])
	def test_parse_size(this, value, expected):
		this.assert_equal(parse_size(value), expected)

	@pytest.mark.parametrize("value", ["", "MiB", "-1", "1.5GiB", "10 parsecs"])
	def test_parse_size_rejects(this, value):
		this.assert_raises(ValueError, parse_size, value)

	def test_parse_umask(this):
		this.assert_equal(parse_umask("022"), 0o022)
		this.assert_equal(parse_umask("0027"), 0o027)
		this.assert_equal(parse_umask("7"), 0o007)
		this.assert_equal(parse_umask(0o077), 0o077)
		this.assert_raises(ValueError, parse_umask, "8")
		this.assert_raises(ValueError, parse_umask, "1777")
		this.assert_raises(ValueError, parse_umask, "rwx")

	def test_parse_log_level(this):
		this.assert_equal(parse_log_level("debug"), 10)
		this.assert_raises(ValueError, parse_log_level, "loud")


class TestConfiguration(StandardTestFixture):

	def test_defaults(this):
		configuration = Configuration()
		this.assert_equal(configuration.GetBytes(USER_BLOCK_SIZE_BYTES_DEFAULT), 512 * 1024**2)
		this.assert_equal(configuration.GetEnum(USER_FILE_WRITE_TYPE_DEFAULT, WriteType), WriteType.MUST_CACHE)
		this.assert_equal(configuration.Get(USER_FILE_WRITE_LOCATION_POLICY), "LocalFirstPolicy")
		this.assert_equal(configuration.GetUMask(SECURITY_AUTHORIZATION_PERMISSION_UMASK), 0o022)

	def test_values_override_defaults(this):
		configuration = Configuration({USER_BLOCK_SIZE_BYTES_DEFAULT: "1MiB"})
		this.assert_equal(configuration.GetBytes(USER_BLOCK_SIZE_BYTES_DEFAULT), 1024**2)

	def test_set_is_fluent(this):
		configuration = Configuration()
		assert configuration.Set("river.test", "1") is configuration
		this.assert_equal(configuration.Get("river.test"), "1")

	def test_missing_key(this):
		configuration = Configuration()
		this.assert_raises(ConfigurationError, configuration.Get, "river.missing")
		this.assert_equal(configuration.Get("river.missing", None), None)
		this.assert_equal(configuration.Get("river.missing", "x"), "x")
		assert not configuration.Contains("river.missing")
		assert configuration.Contains(USER_BLOCK_SIZE_BYTES_DEFAULT)

	def test_configuration_error_is_value_error(this):
		with pytest.raises(ValueError) as e:
			Configuration({"river.n": "nope"}).GetBytes("river.n")
		this.assert_equal(e.value.key, "river.n")

	def test_enum_is_case_insensitive(this):
		configuration = Configuration({USER_FILE_WRITE_TYPE_DEFAULT: " async_through "})
		this.assert_equal(configuration.GetEnum(USER_FILE_WRITE_TYPE_DEFAULT, WriteType), WriteType.ASYNC_THROUGH)

	def test_enum_accepts_members(this):
		configuration = Configuration({USER_FILE_WRITE_TYPE_DEFAULT: WriteType.THROUGH})
		this.assert_equal(configuration.GetEnum(USER_FILE_WRITE_TYPE_DEFAULT, WriteType), WriteType.THROUGH)

	def test_bad_enum_lists_choices(this):
		configuration = Configuration({USER_FILE_WRITE_TYPE_DEFAULT: "WRITE_ONLY_MEMORY"})
		with pytest.raises(ConfigurationError) as e:
			configuration.GetEnum(USER_FILE_WRITE_TYPE_DEFAULT, WriteType)
		assert "CACHE_THROUGH" in str(e.value)

	def test_bad_values(this):
		configuration = Configuration({
			USER_BLOCK_SIZE_BYTES_DEFAULT: "big",
			SECURITY_AUTHORIZATION_PERMISSION_UMASK: "abc",
		})
		this.assert_raises(ConfigurationError, configuration.GetBytes, USER_BLOCK_SIZE_BYTES_DEFAULT)
		this.assert_raises(ConfigurationError, configuration.GetUMask, SECURITY_AUTHORIZATION_PERMISSION_UMASK)

	def test_get_instance(this):
		configuration = Configuration({USER_FILE_WRITE_LOCATION_POLICY: "round_robin"})
		policy = configuration.GetInstance(USER_FILE_WRITE_LOCATION_POLICY, LocationPolicy)
		assert isinstance(policy, RoundRobinPolicy)

	def test_from_environment(this):
		environ = {
			"RIVER_USER_BLOCK_SIZE_BYTES_DEFAULT": "64MiB",
			"RIVER_USER_FILE_WRITETYPE_DEFAULT": "THROUGH",
			"HOME": "/root",
		}
		configuration = Configuration.FromEnvironment(environ=environ)
		this.assert_equal(configuration.GetBytes(USER_BLOCK_SIZE_BYTES_DEFAULT), 64 * 1024**2)
		this.assert_equal(configuration.GetEnum(USER_FILE_WRITE_TYPE_DEFAULT, WriteType), WriteType.THROUGH)
		this.assert_equal(configuration.Get("home", None), None)

	def test_from_json_file(this):
		with open(this.file_name, 'w') as file:
			json.dump({USER_BLOCK_SIZE_BYTES_DEFAULT: 1048576, USER_FILE_WRITE_TYPE_DEFAULT: "NONE"}, file)

		configuration = Configuration.FromJsonFile(this.file_name)
		this.assert_equal(configuration.GetBytes(USER_BLOCK_SIZE_BYTES_DEFAULT), 1048576)
		this.assert_equal(configuration.GetEnum(USER_FILE_WRITE_TYPE_DEFAULT, WriteType), WriteType.NONE)

	def test_from_bad_json_file(this):
		with open(this.file_name, 'w') as file:
			file.write("[1, 2")
		this.assert_raises(ConfigurationError, Configuration.FromJsonFile, this.file_name)

		with open(this.file_name, 'w') as file:
			json.dump([1, 2], file)
		this.assert_raises(ConfigurationError, Configuration.FromJsonFile, this.file_name)

	def test_from_missing_json_file(this):
		this.assert_raises(ConfigurationError, Configuration.FromJsonFile, this.file_name + ".missing")
