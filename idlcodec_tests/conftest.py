import os

from idlcodec.conf import DEFAULT_SETTINGS_FILEPATH

os.environ['IDLCODEC_CONFIG_YAML'] = os.environ.get('IDLCODEC_TEST_CONFIG_YAML', DEFAULT_SETTINGS_FILEPATH)
