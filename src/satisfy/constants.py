import re

TAG_MARKER = '@'

PLACEHOLDER_PATTERN = re.compile(r'<([^>]*)>')

DEFAULT_FEATURE_TYPE = 'feature'

METADATA_MARKER = 'satisfy'

ENV_FEATURE_TYPE = 'SATISFY_FEATURE_TYPE'

FEATURE_FILE_PATTERN = '**/*.feature'
