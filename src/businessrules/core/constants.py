"""
Constants shared by the rule engine and the bundled rules.

This module defines:
- Error codes and descriptions reported by the leaf rules
- The data key naming the failing property
- The timestamp format used when an error is escalated
- The JSON schema of a serialized BusinessRuleException
"""

# Error data

PROPERTY_KEY = "PROPERTY"

STRING_REQUIRED_ERROR_CODE = "common.errors.property.string.required"
OBJECT_REQUIRED_ERROR_CODE = "common.errors.property.object.required"
STRING_FORMAT_ERROR_CODE = "common.errors.property.string.format"

PROPERTY_REQUIRED_DESCRIPTION = "property required"
WRONG_FORMAT_DESCRIPTION = "wrong format"

# Locale's date and time representation; meant for humans, not for parsing
ERROR_TIME_FORMAT = "%c"

# Serialization

EXCEPTION_PAYLOAD_SCHEMA = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "BusinessRuleException",
    "type": "object",
    "properties": {
        "id": {"type": "string", "minLength": 1},
        "data": {
            "type": "object",
            "additionalProperties": {"type": "string"},
        },
        "errorCode": {"type": "string"},
        "errorTime": {"type": "string"},
        "description": {"type": "string"},
    },
    "required": ["id", "data", "errorCode", "errorTime", "description"],
    "additionalProperties": False,
}
