import os
import sys

import structlog

from xmlrpc_codec.conf import CONFIG_YAML_ENV_VAR, UNITTESTS_SETTINGS_FILEPATH

os.environ[CONFIG_YAML_ENV_VAR] = os.environ.get('XMLRPC_CODEC_TEST_CONFIG_YAML', UNITTESTS_SETTINGS_FILEPATH)

# structlog's default logger prints to stdout, which doctest captures as example output
structlog.configure(logger_factory=structlog.PrintLoggerFactory(file=sys.stderr))
