"""
Central configuration and tunable constants.

- Naming limits and suffixes are centralized so the rules stay declarative.
- Resource type tags select which generated resources get checked.
- The default region is only used by the CLI when none is given.
"""

# Top-level key under `custom` that holds this tool's configuration
CONFIG_KEY = "conventions"
IGNORE_KEY = "ignore"

# Service names
MAX_SERVICE_NAME_LENGTH = 23
FORBIDDEN_SERVICE_WORD = "service"

# Stage names: exactly three lowercase letters (dev, tst, stg, prd ...)
STAGE_NAME_LENGTH = 3

# Handlers are referenced as "path/to/file-name.handler"
HANDLER_SUFFIX = ".handler"

# CloudFormation resource types we care about
DYNAMODB_TABLE_TYPE = "AWS::DynamoDB::Table"
SSM_PARAMETER_TYPE = "AWS::SSM::Parameter"

DEFAULT_AWS_REGION = "ap-southeast-2"
